import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .table import Table


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def dump_table(table: "Table", name: str):
    printf("== {0:s} ==\n", name)
    printf(
        "size {0:d}, probe {1:s}, count {2:d}, capacity {3:d}, load {4:.2f}\n",
        table.size,
        table.probe_type.name,
        table.count,
        table.capacity(),
        table.load_factor(),
    )

    for index, entry in enumerate(table.entries):
        dump_entry(index, entry.key, entry.value)


def dump_entry(index: int, key: str | None, value: Any):
    printf("{0:04d} ", index)
    if key is None:
        printf("   .\n")
    else:
        printf("{0:s} -> {1!r}\n", key, value)


def dump_probe_sequence(table: "Table", key: str):
    printf("== probe {0:s} ==\n", key)

    step = 0
    for index in table.probe_indices(key):
        entry = table.entries[index]
        printf("{0:4d} {1:04d} ", step, index)
        if entry.key is None:
            printf("empty\n")
        elif entry.key == key:
            printf("hit\n")
        else:
            printf("collision {0:s}\n", entry.key)
        step += 1


def trace_resize(old_size: int, new_size: int, count: int):
    printf_err("resize {0:d} -> {1:d} ({2:d} entries)\n", old_size, new_size, count)
