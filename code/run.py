from pqueue.indexedheap import IndexedMinHeap
from pqueue.lib.exceptions import (DuplicateValueError, EmptyContainerError,
                                   MissingValueError)
from pqueue.lib.heapop import HeapOp
from pqueue.lib.logger import Logger, logger
from pqueue.lib.progress_bar import ProgressBar
from pqueue.lib.traces import identify_trace, get_trace_reader
from pqueue.lib.visualizinator import Visualizinator
from timeit import timeit
import numpy as np
import csv
import os

progress_bar_size = 30

CONTRACT_ERRORS = (DuplicateValueError, MissingValueError, EmptyContainerError)


# Apply a single trace operation to the heap and return its result
def request(heap, op, value, priority):
    if op == HeapOp.ADD:
        return heap.add(value, priority)
    if op == HeapOp.POLL:
        return heap.poll()
    if op == HeapOp.PEEK:
        return heap.peek()
    if op == HeapOp.CONTAINS:
        return heap.contains(value)
    if op == HeapOp.CHANGE:
        return heap.changePriority(value, priority)
    raise ValueError("Unsupported heap operation {}".format(op))


class WorkloadTest:
    def __init__(self, trace_file, capacity, window_size, **kwargs):
        self.trace_file = trace_file
        self.capacity = capacity
        self.window_size = window_size
        self.kwargs = kwargs
        self.trace_type = identify_trace(trace_file)
        trace_reader = get_trace_reader(self.trace_type)
        self.reader = trace_reader(trace_file, **kwargs)

        self.counts = {op: 0 for op in HeapOp}
        self.errors = {op: 0 for op in HeapOp}
        self.order_violations = 0
        self.final_size = 0
        self.final_capacity = capacity
        self.avg_load_factor = None
        self.visual = None

    def _run(self):
        heap = IndexedMinHeap(self.capacity)
        self.visual = Visualizinator(
            labels=['size', 'capacity', 'load-factor', 'poll-rate'],
            windowed_labels=['load-factor', 'poll-rate'],
            window_size=self.window_size,
            enable_visual=self.kwargs.get("enable_visual", False))
        progress_bar = ProgressBar(progress_bar_size,
                                   title="{} {}".format(
                                       os.path.basename(self.trace_file),
                                       self.capacity))

        # priority of the last poll since the last add/change
        last_polled = None
        time = 0
        for op, value, priority in self.reader.read():
            time += 1
            self.counts[op] += 1

            if op == HeapOp.POLL and heap.size() > 0:
                polled = heap.peekPriority()
                if last_polled is not None and polled < last_polled:
                    self.order_violations += 1
                    logger().warning(
                        "Out of order poll at op {}: {} after {}".format(
                            time, polled, last_polled))
                last_polled = polled
            elif op in (HeapOp.ADD, HeapOp.CHANGE):
                last_polled = None

            try:
                request(heap, op, value, priority)
            except CONTRACT_ERRORS as e:
                self.errors[op] += 1
                logger().debug("op {} {} failed: {}".format(
                    time, op.value, e))

            self.visual.add({
                'size': (time, heap.size()),
                'capacity': (time, heap.getCap()),
            })
            self.visual.addWindow({
                'load-factor': heap.loadFactor(),
                'poll-rate': 1 if op == HeapOp.POLL else 0,
            }, time)

            progress_bar.progress = self.reader.progress
            progress_bar.status = "size={}".format(heap.size())
            progress_bar.print()
        progress_bar.print_complete()

        self.final_size = heap.size()
        self.final_capacity = heap.getCap()
        load_factors = self.visual.get('load-factor')
        if load_factors:
            self.avg_load_factor = np.mean([y for _, y in load_factors])

    def run(self, config):
        logger().info("Replaying {} with capacity {}".format(
            self.trace_file, self.capacity))
        time = round(timeit(self._run, number=1), 2)
        ops = self.reader.num_requests()
        errors = sum(self.errors.values())
        print(
            "Results: {:<8} capacity={:<6} ops={} errors={} violations={} "
            "size={} final_capacity={} {:8}s {}".format(
                self.trace_type, self.capacity, ops, errors,
                self.order_violations, self.final_size, self.final_capacity,
                time, self.trace_file),
            *("{}={}".format(op.value, self.counts[op]) for op in HeapOp))

        if "output_csv" in config:
            self.writeCSV(config["output_csv"], ops, errors, time)

        if self.visual.enable_visual and "plot_file" in config:
            plot_file = config["plot_file"].format(
                trace=os.path.basename(self.trace_file), capacity=self.capacity)
            self.visual.save(plot_file,
                             title="{} capacity={}".format(
                                 os.path.basename(self.trace_file),
                                 self.capacity))
        return time

    def writeCSV(self, filename, ops, errors, time):
        with open(filename, 'a+') as csvfile:
            writer = csv.writer(csvfile,
                                delimiter=',',
                                quotechar='|',
                                quoting=csv.QUOTE_MINIMAL)
            writer.writerow([
                self.trace_file, self.trace_type, self.capacity, ops,
                self.reader.num_unique(), errors, self.order_violations,
                self.final_size, self.final_capacity,
                round(self.avg_load_factor, 3)
                if self.avg_load_factor is not None else self.avg_load_factor,
                time, *(self.counts[op] for op in HeapOp)
            ])


def generateTraceNames(trace):
    if trace.startswith('~'):
        trace = os.path.expanduser(trace)

    if os.path.isdir(trace):
        for trace_name in sorted(os.listdir(trace)):
            yield os.path.join(trace, trace_name)
    elif os.path.isfile(trace):
        yield trace
    else:
        raise ValueError("{} is not a directory or a file".format(trace))


def generateWorkloadTests(trace_name, config):
    window_size = config.get('window_size', 100)
    options = {k: v for k, v in config.items() if k != 'window_size'}
    for capacity in config.get('capacities', [10]):
        if not isinstance(capacity, int) or capacity < 1:
            raise ValueError(
                "Capacity {} must be a positive integer".format(capacity))
        yield WorkloadTest(trace_name, capacity, window_size, **options)


def main(config):
    Logger.configure(config.get('log_file'), config.get('log_level'))

    for trace in config['traces']:
        for trace_name in generateTraceNames(trace):
            print(trace_name)
            for test in generateWorkloadTests(trace_name, config):
                test.run(config)


if __name__ == '__main__':
    import sys
    import json

    with open(sys.argv[1], 'r') as f:
        config = json.loads(f.read())

    main(config)
