from dataclasses import dataclass
import sys

from .debug import dump_probe_sequence, dump_table, printf, printf_err
from .hashing import InvalidKeyError
from .probe import ProbeType
from .table import NotFound, Table, set_debug_trace_resize


DEFAULT_CAPACITY = 16

_PROBE_NAMES = {
    "linear": ProbeType.LINEAR,
    "quadratic": ProbeType.QUADRATIC,
    "double": ProbeType.DOUBLE_HASH,
}


@dataclass(frozen=True)
class CommandOk:
    pass


@dataclass(frozen=True)
class CommandError:
    message: str


@dataclass(frozen=True)
class InvalidKey:
    message: str


CommandResult = CommandOk | CommandError | InvalidKey


table: Table


def init_table(capacity: int = DEFAULT_CAPACITY, probe_type: ProbeType = ProbeType.LINEAR):
    global table
    table = Table(capacity, probe_type)


def interpret(line: str) -> CommandResult:
    words = line.split("#", 1)[0].split()
    if not words:
        return CommandOk()

    try:
        return run_command(words[0], words[1:])
    except InvalidKeyError as e:
        return InvalidKey(str(e))


def run_command(name: str, args: list[str]) -> CommandResult:
    match name, args:
        case "new", [capacity]:
            return new_table(capacity, "linear")
        case "new", [capacity, probe]:
            return new_table(capacity, probe)
        case "put", [key, value]:
            table.put(key, value)
        case "get", [key]:
            value = table.get(key)
            printf("{0:s}\n", "nil" if isinstance(value, NotFound) else value)
        case "has", [key]:
            printf("{0:s}\n", "true" if table.has_key(key) else "false")
        case "keys", []:
            for key in sorted(table.keys()):
                printf("{0:s}\n", key)
        case "load", []:
            printf("{0:.2f}\n", table.load_factor())
        case "capacity", []:
            printf("{0:d}\n", table.capacity())
        case "size", []:
            printf("{0:d}\n", table.size)
        case "dump", []:
            dump_table(table, "table")
        case "probe", [key]:
            dump_probe_sequence(table, key)
        case "trace", ["on" | "off" as flag]:
            set_debug_trace_resize(flag == "on")
        case _:
            return CommandError(f"bad command: {' '.join([name, *args])}")

    return CommandOk()


def new_table(capacity: str, probe: str) -> CommandResult:
    global table

    try:
        initial_capacity = int(capacity)
    except ValueError:
        initial_capacity = 0
    if initial_capacity < 1:
        return CommandError(f"capacity should be a positive integer, got {capacity!r}")
    if probe not in _PROBE_NAMES:
        return CommandError(f"unknown probe type {probe!r}")

    table = Table(initial_capacity, _PROBE_NAMES[probe])
    return CommandOk()


def report(result: CommandResult):
    match result:
        case CommandError(message) | InvalidKey(message):
            printf_err("{0:s}\n", message)


def repl():
    while True:
        try:
            inpt = input()
        except EOFError:
            break
        report(interpret(inpt))


def run_file(filepath: str):
    with open(filepath) as fp:
        for line in fp:
            result = interpret(line)
            report(result)

            if isinstance(result, CommandError):
                sys.exit(65)
            if isinstance(result, InvalidKey):
                sys.exit(70)


def main():
    init_table()

    if len(sys.argv) == 1:
        repl()
    elif len(sys.argv) == 2:
        run_file(sys.argv[1])
    else:
        printf("Usage: htable [path]\n")
        sys.exit(64)
