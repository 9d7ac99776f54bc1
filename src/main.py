import sys
from pseudoc_anasin import classify
from pseudoc_anasem import Analyzer
from pseudoc_report import render_table, dump_json

#exit status when the input file cannot be read
EXIT_IO_FAILURE = 1
EXIT_USAGE = 2

USAGE = "Usage: python main.py <file.c> [--json <out.json>]"

#failures of the input source itself, not of the analysed code
INPUT_ERRORS = (OSError, UnicodeDecodeError)


def process_line(analyzer, line):
    """Classifies one line and hands it to the analyzer."""
    stmt = classify(line)
    if stmt is not None:
        analyzer.visit(stmt)
    return stmt


def file_input_handler(analyzer, filename):
    """
    Processes every line of a file. OSError and UnicodeDecodeError propagate
    to the caller, the file is closed on every path. A UTF-8 BOM is dropped.
    """
    with open(filename, 'r', encoding='utf-8-sig') as f:
        print(f"\n--- Processing File: {filename} ---", file=analyzer.out)

        for line_num, line in enumerate(f, start=1):
            line = line.rstrip('\n')
            print(f"\n[Line {line_num:02d}]: {line}", file=analyzer.out)
            process_line(analyzer, line)


def console_input_handler(analyzer, stream=None):
    """Reads statements until 'exit' or end of input."""
    stream = stream if stream is not None else sys.stdin

    print("\n--- Interactive Console Mode ---", file=analyzer.out)
    print("Enter statements (e.g., 'int x;', 'void func() {', '}') or 'exit'.", file=analyzer.out)

    while True:
        print(f"\n[{analyzer.scopes.current}] > ", end='', file=analyzer.out)
        line = stream.readline()
        if not line:
            break
        line = line.rstrip('\n')
        if line.strip() == 'exit':
            break
        process_line(analyzer, line)


def run_file(filename, json_path=None, out=None):
    analyzer = Analyzer(out=out)
    file_input_handler(analyzer, filename)
    render_table(analyzer)

    if json_path:
        dump_json(analyzer, json_path)
        print(f"\n[OK] Symbol table exported to: {json_path}", file=analyzer.out)

    return analyzer


def ask(prompt):
    try:
        return input(prompt).strip()
    except EOFError:
        return ''


def menu():
    analyzer = Analyzer()

    while True:
        # each run starts from a clean table
        analyzer.reset()

        print("\n*** Symbol Table Manager ***")
        print("This tool simulates a compiler's symbol table, managing variables, scopes,")
        print("and semantic checks for C-style code with int, float, and char types.")
        print("Choose an input mode to begin analysis:")
        print("-" * 51)
        print("1. Generate symbol table from an input file")
        print("2. Interactive Console input")
        print("-" * 51)

        choice = ask("Enter choice (1 or 2): ")

        if choice == '1':
            filename = ask("Enter input filename (e.g., inputFiles/inputFile1.c): ")
            try:
                file_input_handler(analyzer, filename)
            except INPUT_ERRORS as e:
                print(f"Error opening file: {e}")
                sys.exit(EXIT_IO_FAILURE)
            render_table(analyzer)
            again = ask("\nDo you want to generate symbol table for another file? (y/n): ")
        elif choice == '2':
            console_input_handler(analyzer)
            render_table(analyzer)
            again = ask("\nDo you want to generate symbol table for another console input? (y/n): ")
        else:
            print("Invalid choice. Exiting.")
            return

        if again.lower() != 'y':
            break

    print("\nExiting Compiler Simulation")


def parse_args(argv):
    """
    Returns (filename, json_path) from argv[1:].
    The filename is the first argument outside the --json pair.
    """
    filename = None
    json_path = None
    args = iter(argv[1:])

    for arg in args:
        if arg == '--json':
            json_path = next(args, None)
            if json_path is None:
                print(USAGE)
                sys.exit(EXIT_USAGE)
        elif filename is None:
            filename = arg
        else:
            print(USAGE)
            sys.exit(EXIT_USAGE)

    return filename, json_path


def main(argv):
    filename, json_path = parse_args(argv)

    if filename is None:
        if json_path is not None:
            print(USAGE)
            sys.exit(EXIT_USAGE)
        menu()
        return

    try:
        analyzer = run_file(filename, json_path)
    except INPUT_ERRORS as e:
        print(f"Error opening file: {e}")
        sys.exit(EXIT_IO_FAILURE)

    #semantic failures are reported but do not change the exit status
    return analyzer


if __name__ == "__main__":
    main(sys.argv)
