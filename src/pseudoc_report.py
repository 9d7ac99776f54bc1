import json
from pseudoc_anasem import GLOBAL_SCOPE, display_name


class ReportRenderer:
    def __init__(self, analyzer):
        """
        Renders the final report of one run.
        :param analyzer: the Analyzer whose table is shown.
        """
        self.analyzer = analyzer
        self.out = analyzer.out

    def emit(self, line=""):
        print(line, file=self.out)

    def render(self):
        table = self.analyzer.table
        errors = self.analyzer.error_count()

        self.emit("\n\n" + "#" * 67)
        self.emit(f"FINAL SYMBOL TABLE SUMMARY (Total Entries: {len(table)}, Errors: {errors})")
        self.emit("#" * 67)
        self.emit("| NAME     | TYPE  | SCOPE    | SIZE | ADDRESS/OFFSET | END_ADDR |")
        self.emit("|----------|-------|----------|------|----------------|----------|")

        for entry in table.entries():
            self.emit(self.format_row(entry))

        self.emit("=" * 67)
        self.emit(f"NEXT GLOBAL START ADDRESS: {self.analyzer.scopes.next_global_address}")
        self.emit("-" * 67)
        self.emit(self.status_line())
        self.emit("#" * 67)

    def format_row(self, entry):
        start = entry['location']
        end = entry['location'] + entry['size'] - 1
        # local offsets are relative to the base pointer
        label = "" if entry['scope'] == GLOBAL_SCOPE else " (BP)"
        return "| {:<8} | {:<5} | {:<8} | {:<4} | {:<12}{} | {:<8} |".format(
            entry['name'], display_name(entry['type']), entry['scope'],
            entry['size'], start, label, end)

    def status_line(self):
        errors = self.analyzer.error_count()
        if errors > 0:
            return f"COMPILATION STATUS: FAILED with {errors} Semantic/Syntax Errors."
        return "COMPILATION STATUS: SUCCESS (No Semantic/Syntax Errors Detected)."


def render_table(analyzer):
    ReportRenderer(analyzer).render()


def table_as_dict(analyzer):
    return {
        'entries': [dict(entry, type=display_name(entry['type'])) for entry in analyzer.table.entries()],
        'errors': analyzer.error_count(),
        'next_global_address': analyzer.scopes.next_global_address,
        'success': analyzer.error_count() == 0,
    }


def dump_json(analyzer, path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(table_as_dict(analyzer), f, indent=4)
