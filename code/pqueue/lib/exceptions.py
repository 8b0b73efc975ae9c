# Contract violations raised by the containers. Each one subclasses the
# builtin a caller would expect from a list or dict in the same situation.


class DuplicateValueError(ValueError):
    def __init__(self, value):
        super().__init__("{!r} is already in the heap".format(value))
        self.value = value


class MissingValueError(ValueError):
    def __init__(self, value):
        super().__init__("{!r} is not in the heap".format(value))
        self.value = value


class EmptyContainerError(IndexError):
    def __init__(self, error_message):
        super().__init__(error_message)


class OutOfRangeError(IndexError):
    def __init__(self, index, size):
        super().__init__("index {} out of range for size {}".format(
            index, size))
        self.index = index
        self.size = size
