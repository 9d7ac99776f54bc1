import sys

MAX_SYMBOLS = 100
GLOBAL_START_ADDRESS = 1000
GLOBAL_SCOPE = 'Global'

#type tags
TYPE_INT = 'INT'
TYPE_FLOAT = 'FLOAT'
TYPE_CHAR = 'CHAR'
TYPE_UNKNOWN = 'UNKNOWN'

#insertion rejections
DUPLICATE_IN_SCOPE = 'DUPLICATE_IN_SCOPE'
CAPACITY_EXCEEDED = 'CAPACITY_EXCEEDED'

#type keywords (exact, case sensitive)
type_map = {
    'int': TYPE_INT,
    'float': TYPE_FLOAT,
    'char': TYPE_CHAR,
}

type_sizes = {
    TYPE_INT: 4,
    TYPE_FLOAT: 8,
    TYPE_CHAR: 1,
}


def size_of(type_tag):
    """Bytes occupied by a type; 0 for anything outside the catalog."""
    return type_sizes.get(type_tag, 0)

def parse_type(name):
    return type_map.get(name, TYPE_UNKNOWN)

def display_name(type_tag):
    return type_tag if type_tag in type_sizes else TYPE_UNKNOWN


class Diagnostics:
    """Error counter for one run. Messages are printed, never stored."""

    def __init__(self):
        self._count = 0

    def increment(self):
        self._count += 1

    def reset(self):
        self._count = 0

    def count(self):
        return self._count


class ScopeState:
    def __init__(self, out, global_base=GLOBAL_START_ADDRESS):
        """
        Scope and allocation state of one run.
        - only one local scope exists at a time (there is no stack)
        - the global cursor grows for the whole run
        - the local cursor goes back to 0 on every push_scope
        """
        self.out = out
        self.global_base = global_base
        self.reset()

    def reset(self):
        self.current = GLOBAL_SCOPE
        self.next_global_address = self.global_base
        self.next_local_offset = 0

    def is_global(self):
        return self.current == GLOBAL_SCOPE

    def push_scope(self, name):
        """
        Enters a local scope. A previous local scope is discarded,
        so nested and sibling bodies are treated the same way.
        """
        self.current = name
        self.next_local_offset = 0
        print(f"\n-> SCOPE CHANGE: Pushing new Local Scope: '{name}'. "
              f"Local Offset reset to 0 (Base Pointer).", file=self.out)

    def pop_scope(self):
        if not self.is_global():
            print(f"<- SCOPE CHANGE: Popping Scope: '{self.current}'. "
                  f"Reverting to Global Scope.", file=self.out)
            self.current = GLOBAL_SCOPE

    def allocate(self, scope, size):
        """
        Returns the address (global) or offset (local) of the new symbol
        and advances the matching cursor.
        """
        if scope == GLOBAL_SCOPE:
            location = self.next_global_address
            self.next_global_address += size
        else:
            location = self.next_local_offset
            self.next_local_offset += size
        return location


class SymbolTable:
    def __init__(self, scopes, diagnostics, out, capacity=MAX_SYMBOLS):
        """
        Symbol entries in insertion order.
        - entries are never removed
        - handles are indexes into the list
        """
        self.scopes = scopes
        self.diagnostics = diagnostics
        self.out = out
        self.capacity = capacity
        self._entries = []

    def reset(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def get(self, index):
        return self._entries[index]

    def entries(self):
        return tuple(self._entries)

    def lookup(self, name):
        """
        First entry with this name, whatever its scope.
        A global declared earlier wins over a local with the same name.
        """
        for index, entry in enumerate(self._entries):
            if entry['name'] == name:
                return index
        return None

    def insert(self, name, type_tag, scope):
        """
        Stores a symbol and gives it a location.
        Returns (index, None) or (None, rejection reason).
        """
        if len(self._entries) >= self.capacity:
            print(f"FATAL ERROR: Symbol Table capacity reached. Cannot insert {name}.",
                  file=self.out)
            self.diagnostics.increment()
            return None, CAPACITY_EXCEEDED

        for entry in self._entries:
            if entry['name'] == name and entry['scope'] == scope:
                print(f"ERROR (Semantic): Variable '{name}' already declared in scope '{scope}'.",
                      file=self.out)
                self.diagnostics.increment()
                return None, DUPLICATE_IN_SCOPE

        size = size_of(type_tag)
        location = self.scopes.allocate(scope, size)

        self._entries.append({
            'name': name,
            'type': type_tag,
            'scope': scope,
            'size': size,
            'location': location,
            'active': True,
            })

        if scope == GLOBAL_SCOPE:
            print(f"  -> INSERTED: '{name}' [Type: {display_name(type_tag)}, Scope: {scope}] "
                  f"@ Address {location}.", file=self.out)
        else:
            print(f"  -> INSERTED: '{name}' [Type: {display_name(type_tag)}, Scope: {scope}] "
                  f"@ Offset {location} (Size: {size} Bytes).", file=self.out)

        return len(self._entries) - 1, None


class Analyzer:
    def __init__(self, capacity=MAX_SYMBOLS, global_base=GLOBAL_START_ADDRESS, out=None):
        """
        Context of one analysis run: diagnostics, scopes and symbol table.
        :param capacity: maximum number of symbols.
        :param global_base: first address of the global segment.
        :param out: stream for messages (stdout by default).
        """
        self.out = out if out is not None else sys.stdout
        self.diagnostics = Diagnostics()
        self.scopes = ScopeState(self.out, global_base)
        self.table = SymbolTable(self.scopes, self.diagnostics, self.out, capacity)

    def reset(self):
        """Back to the initial state for a new run."""
        self.diagnostics.reset()
        self.scopes.reset()
        self.table.reset()

    def error_count(self):
        return self.diagnostics.count()

    #statement dispatch
    def visit(self, stmt):
        """Dynamic dispatch: looks up visit_KIND for each statement."""
        visitor = getattr(self, f'visit_{stmt[0]}', self.generic_visit)
        return visitor(stmt)

    def generic_visit(self, stmt):
        self.handle_unrecognized(' '.join(str(part) for part in stmt))

    def visit_DECLARE(self, stmt):
        self.handle_declaration(stmt[1], stmt[2])

    def visit_OPEN_SCOPE(self, stmt):
        self.scopes.push_scope(stmt[1])

    def visit_CLOSE_SCOPE(self, stmt):
        self.scopes.pop_scope()

    def visit_ASSIGN(self, stmt):
        self.handle_simple_assignment(stmt[1], stmt[2])

    def visit_ARITH_ASSIGN(self, stmt):
        self.handle_arithmetic_assignment(*stmt[1:])

    def visit_UNRECOGNIZED(self, stmt):
        self.handle_unrecognized(stmt[1])

    #handlers
    def handle_declaration(self, type_name, var_name):
        type_tag = parse_type(type_name)
        if type_tag == TYPE_UNKNOWN:
            print(f"ERROR (Syntax): Unknown type specifier '{type_name}'.", file=self.out)
            self.diagnostics.increment()
            return None, TYPE_UNKNOWN
        return self.table.insert(var_name, type_tag, self.scopes.current)

    def handle_simple_assignment(self, target, source):
        print(f"\n- Processing Assignment: '{target} = {source};'", file=self.out)
        return self._check_operands(target, source)

    def handle_arithmetic_assignment(self, target, source, operator, operand):
        # operator and operand are only traced, never checked
        print(f"\n- Processing Arithmetic Assignment: '{target} = {source} {operator} {operand};'",
              file=self.out)
        return self._check_operands(target, source)

    def handle_unrecognized(self, raw):
        print(f"WARNING (Syntax): Skipping unhandled syntax: {raw}", file=self.out)

    def _check_operands(self, target, source):
        """
        Checks both sides independently.
        Returns True when both names resolve.
        """
        target_index = self.table.lookup(target)
        source_index = self.table.lookup(source)

        if target_index is None:
            print(f"  -> ERROR (Semantic): Target variable '{target}' is UNdeclared.", file=self.out)
            self.diagnostics.increment()
        if source_index is None:
            print(f"  -> ERROR (Semantic): Source variable '{source}' is UNdeclared.", file=self.out)
            self.diagnostics.increment()

        if target_index is None or source_index is None:
            return False

        target_entry = self.table.get(target_index)
        source_entry = self.table.get(source_index)

        # a type difference is only a warning
        if target_entry['type'] != source_entry['type']:
            print(f"  -> WARNING (Type): Assignment involves different types "
                  f"({display_name(target_entry['type'])} and {display_name(source_entry['type'])}).",
                  file=self.out)

        print(f"  -> Lookup Trace: '{target}' found in scope '{target_entry['scope']}'.", file=self.out)
        print(f"  -> Lookup Trace: '{source}' found in scope '{source_entry['scope']}'.", file=self.out)
        return True
