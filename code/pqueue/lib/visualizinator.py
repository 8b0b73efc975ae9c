import numpy as np
from collections import deque
from .optional_args import process_kwargs
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
plt.rcParams.update({'font.size': 12})


# Track statistics of a heap while a trace is replayed. Every label holds a
# list of (x, y) points, e.g. ('size', (time, heap.size())). Windowed labels
# store the rolling mean over the last window_size values instead of the raw
# value. Nothing is recorded unless enable_visual is passed in.
class Visualizinator:
    def __init__(self,
                 labels=('default',),
                 windowed_labels=None,
                 window_size=None,
                 **kwargs):
        self.enable_visual = False
        process_kwargs(self, kwargs, acceptable_kws=["enable_visual"])

        self.tracked_values = {}

        self.labels = labels
        for label in labels:
            self.tracked_values[label] = []

        self.windowed_values = {}
        if windowed_labels:
            assert (window_size is not None and window_size > 0)
            self.windowed_labels = windowed_labels
            self.window_size = window_size
            for windowed_label in windowed_labels:
                assert (windowed_label in labels)
                self.windowed_values[windowed_label] = deque(
                    maxlen=window_size)

    # Get the current data for a given label
    def get(self, label):
        assert (label in self.tracked_values)
        return self.tracked_values[label]

    # Add points with the given labels in the passed dictionary
    # Should be in the form of:
    #   example.add({
    #       'size': (time, 12),
    #       'load-factor': (time, 0.7)})
    def add(self, label_values):
        if self.enable_visual:
            for label in label_values:
                assert (label in self.tracked_values)
                self.tracked_values[label].append(label_values[label])

    # Push raw values into the windows of windowed labels and record the
    # window mean at the given time
    # NOTE: until the window fills up the mean covers the values seen so far
    def addWindow(self, label_values, time):
        if self.enable_visual:
            for label, value in label_values.items():
                assert (label in self.windowed_values)
                window = self.windowed_values[label]
                window.append(value)
                self.tracked_values[label].append((time, np.mean(window)))

    # Get the summation for a given label
    def sum(self, label, axis='y'):
        assert (axis == 'x' or axis == 'y')
        assert (label in self.tracked_values)
        if not self.tracked_values[label]:
            return 0
        x, y = zip(*self.tracked_values[label])
        if axis == 'y':
            return sum(y)
        else:
            return sum(x)

    # Use a passed in graph (matplotlib Axes), create a line graph using the
    # data for the given labels
    def visualize(self,
                  graph,
                  labels=('default',),
                  xlabel=None,
                  ylabel=None,
                  colors=('k-', 'k--', 'r-', 'g-', 'b-')):
        if xlabel:
            graph.set_xlabel(xlabel)
        if ylabel:
            graph.set_ylabel(ylabel)

        for label, color in zip(labels, colors):
            assert (label in self.tracked_values)
            if not self.tracked_values[label]:
                continue
            x, y = zip(*self.tracked_values[label])
            graph.plot(x, y, color, label=label, linewidth=0.95)

        graph.legend(loc="upper left", prop={"size": "8"},
                     bbox_to_anchor=(1, 1))

    # One subplot per label, stacked and sharing the time axis
    def save(self, filename, labels=None, title=None):
        labels = labels if labels else self.labels
        fig, graphs = plt.subplots(len(labels), 1, sharex=True,
                                   figsize=(8, 2.5 * len(labels)),
                                   squeeze=False)
        for graph, label in zip(graphs[:, 0], labels):
            self.visualize(graph, labels=[label], ylabel=label)
        graphs[-1, 0].set_xlabel('operation')
        if title:
            fig.suptitle(title)
        fig.tight_layout()
        fig.savefig(filename)
        plt.close(fig)
