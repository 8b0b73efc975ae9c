import sys


# Single line terminal progress bar, redrawn in place with '\r'.
# status is an optional short string shown after the percentage, e.g. the
# current heap size while a trace is replayed.
class ProgressBar:
    def __init__(self, size, progress_max=100, title='', stream=None):
        self.size = size
        self.progress = 0
        self.status = ''
        self.last_percent = -1
        self.progress_max = progress_max
        self.title = title
        self.stream = stream if stream is not None else sys.stdout

    def percent(self):
        if not self.progress_max:
            return 100
        return min(100, round(100 * (self.progress / self.progress_max)))

    def _write(self, output, end):
        if self.title:
            output = "{} | {}".format(output, self.title)
        print(output, end=end, file=self.stream)
        self.stream.flush()

    def print(self, end=''):
        percent = self.percent()
        if self.last_percent == percent:
            return
        self.last_percent = percent

        size = self.size - 2
        count = round(size * percent / 100)
        output = "\r[{:{size}}] {:3}%".format("=" * count, percent, size=size)
        if self.status:
            output = "{} {}".format(output, self.status)
        self._write(output, end)

    def print_complete(self):
        output = "\r{:<{size}} 100%".format("Complete!", size=self.size)
        self._write(output, '\n')
