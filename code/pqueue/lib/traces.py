import os

import numpy as np

from .heapop import parse_op, parse_priority
from .optional_args import process_kwargs


# Basic Trace Reader as Base Class
# Yields (op, value, priority) for every heap operation in the file, with
# None in place of a value or priority the op does not take.
class Trace:
    def __init__(self, file, **kwargs):
        # Setup
        self.file = file
        self.unique = set()
        self.requests = 0
        self.last_line = None

        # Progress (0-100%)
        self.progress = 0

        # get ending index of file for progress
        self.end = os.path.getsize(self.file)

    def readLine(self, line):
        raise NotImplementedError

    def _updateProgress(self, position):
        if self.end:
            self.progress = round(100 * (position / self.end))
        else:
            self.progress = 100

    def read(self):
        with open(self.file, 'r') as f:
            while True:
                line = f.readline()
                if not line:
                    break
                self.last_line = line
                self._updateProgress(f.tell())
                for op, value, priority in self.readLine(line):
                    yield self._count(op, value, priority)

    def _count(self, op, value, priority):
        self.requests += 1
        if value is not None:
            self.unique.add(value)
        return op, value, priority

    def num_requests(self):
        return self.requests

    def num_unique(self):
        return len(self.unique)


# Plain text trace, one "op [value [priority]]" per line
# NOTE: blank lines and lines starting with '#' are skipped
class OpsTrace(Trace):
    def readLine(self, line):
        line = line.split('#', 1)[0].split()
        if not line:
            return

        op = parse_op(line[0])
        value = line[1] if op.takes_value else None
        priority = parse_priority(line[2]) if op.takes_priority else None
        yield op, value, priority


# Comma separated "op,value,priority", unused columns left empty
class CSVTrace(Trace):
    def readLine(self, line):
        line = [field.strip() for field in line.split(',')]
        if not line[0] or line[0].lower() == 'op':
            return

        op = parse_op(line[0])
        value = line[1] if op.takes_value else None
        priority = parse_priority(line[2]) if op.takes_priority else None
        yield op, value, priority


# Randomly generated workload. The file only holds an optional seed that
# overrides synth_seed from the config, everything else comes from the
# synth_* options.
class SynthTrace(Trace):
    def __init__(self, file, **kwargs):
        super().__init__(file, **kwargs)
        self.ops = 10000
        self.values = 1000
        self.seed = 0
        self.mix = {'add': 0.4, 'poll': 0.3, 'change': 0.2, 'peek': 0.05,
                    'contains': 0.05}
        process_kwargs(self, kwargs,
                       acceptable_kws=['ops', 'values', 'seed', 'mix'],
                       prefix='synth_')

        with open(self.file, 'r') as f:
            seed = f.read().strip()
        if seed:
            self.seed = int(seed)

    def read(self):
        rng = np.random.default_rng(self.seed)
        ops = [parse_op(name) for name in self.mix]
        weights = np.array(list(self.mix.values()), dtype=float)
        weights /= weights.sum()

        choices = rng.choice(len(ops), size=self.ops, p=weights)
        values = rng.integers(0, self.values, size=self.ops)
        priorities = rng.integers(0, 10 * self.values, size=self.ops)

        for i in range(self.ops):
            self.progress = round(100 * ((i + 1) / self.ops))
            op = ops[choices[i]]
            value = str(values[i]) if op.takes_value else None
            priority = int(priorities[i]) if op.takes_priority else None
            yield self._count(op, value, priority)


def get_trace_reader(trace_type):
    trace_type = trace_type.lower()
    if trace_type == 'ops':
        return OpsTrace
    if trace_type == 'csv':
        return CSVTrace
    if trace_type == 'synth':
        return SynthTrace
    raise ValueError("Could not find trace reader for {}".format(trace_type))


def identify_trace(filename):
    if filename.endswith('.ops') or filename.endswith('.txt'):
        return 'ops'
    if filename.endswith('.csv'):
        return 'csv'
    if filename.endswith('.synth'):
        return 'synth'
    raise ValueError("Could not identify trace type of {}".format(filename))


def read_trace_file(filename, **kwargs):
    trace_type = identify_trace(filename)
    trace_reader = get_trace_reader(trace_type)
    reader = trace_reader(filename, **kwargs)
    for op, value, priority in reader.read():
        yield op, value, priority


if __name__ == '__main__':
    import sys
    for op, value, priority in read_trace_file(sys.argv[1]):
        print(op.value, value, priority)
