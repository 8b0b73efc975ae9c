from enum import Enum


# Kind of operation a trace line asks the heap to perform
class HeapOp(Enum):
    ADD = 'add'
    POLL = 'poll'
    PEEK = 'peek'
    CONTAINS = 'contains'
    CHANGE = 'change'

    # Whether the op carries a value and a priority after its name
    @property
    def takes_value(self):
        return self in (HeapOp.ADD, HeapOp.CONTAINS, HeapOp.CHANGE)

    @property
    def takes_priority(self):
        return self in (HeapOp.ADD, HeapOp.CHANGE)


def parse_op(name):
    try:
        return HeapOp(name.strip().lower())
    except ValueError:
        raise ValueError("Unknown heap operation {!r}".format(name)) from None


def parse_priority(text):
    try:
        return int(text)
    except ValueError:
        return float(text)
