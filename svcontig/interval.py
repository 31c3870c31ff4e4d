import re


class Interval:
    """
    inclusive integer range. Coordinates used throughout svcontig are 1-based
    """

    def __init__(self, start, end=None):
        """
        Args:
            start (int): the start of the interval (inclusive)
            end (int): the end of the interval (inclusive)
        """
        self.start = int(start)
        self.end = int(end) if end is not None else self.start
        if self.start > self.end:
            raise AttributeError('interval start > end is not allowed', self.start, self.end)

    def __and__(self, other):  # intersection
        """the intersection of two intervals

        Example:
            >>> Interval(1, 10) & Interval(5, 50)
            Interval(5, 10)
            >>> Interval(1, 2) & Interval(10, 11)
            None
        """
        return Interval.intersection(self, other)

    def __getitem__(self, index):
        try:
            index = int(index)
        except ValueError:
            raise IndexError('index input accessor must be an integer', index)
        if index == 0:
            return self.start
        elif index == 1:
            return self.end
        raise IndexError('index input accessor is out of bounds: 1 or 2 only', index)

    @classmethod
    def intersection(cls, *intervals):
        """
        returns None if there is no intersection

        Example:
            >>> Interval.intersection((1, 10), (2, 8), (7, 15))
            Interval(7, 8)
        """
        if len(intervals) < 1:
            raise AttributeError('cannot compute the intersection of an empty set of intervals')
        low = max([i[0] for i in intervals])
        high = min([i[1] for i in intervals])
        if low > high:
            return None
        return Interval(low, high)

    def __len__(self):
        """
        the length of the interval

        Example:
            >>> len(Interval(1, 11))
            11
        """
        return self.end - self.start + 1

    def __repr__(self):
        return '{}({}, {})'.format(self.__class__.__name__, self.start, self.end)

    def __eq__(self, other):
        try:
            return self[0] == other[0] and self[1] == other[1]
        except (TypeError, IndexError):
            return False

    def __contains__(self, other):
        try:
            if other[0] >= self[0] and other[1] <= self[1]:
                return True
        except TypeError:
            if other >= self[0] and other <= self[1]:
                return True
        return False

    def __hash__(self):
        return hash((self[0], self[1]))


class ReferenceInterval(Interval):
    """
    an interval on a named reference sequence (chromosome)

    Example:
        >>> ReferenceInterval('1', 100, 200)
        ReferenceInterval(1:100-200)
    """

    def __init__(self, chr, start, end=None):
        Interval.__init__(self, start, end)
        self.chr = str(chr)

    @property
    def key(self):
        return (self.chr, self.start, self.end)

    def contains(self, other):
        """
        True if the other interval is on the same reference and lies entirely within this one

        Example:
            >>> ReferenceInterval('1', 1, 100).contains(ReferenceInterval('1', 10, 20))
            True
            >>> ReferenceInterval('1', 1, 100).contains(ReferenceInterval('2', 10, 20))
            False
        """
        return self.chr == other.chr and Interval.__contains__(self, other)

    def __contains__(self, other):
        if isinstance(other, ReferenceInterval):
            return self.contains(other)
        return Interval.__contains__(self, other)

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return '{}:{}-{}'.format(self.chr, self.start, self.end)

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, str(self))

    @classmethod
    def parse(cls, string):
        """
        parse the chr:start-end notation. The chromosome name may itself contain colons

        Example:
            >>> ReferenceInterval.parse('HLA-A*01:01:01:01:1-300')
            ReferenceInterval(HLA-A*01:01:01:01:1-300)
        """
        match = re.match(r'^(.+):(\d+)-(\d+)$', string)
        if not match:
            raise ValueError('could not parse reference interval', string)
        return cls(match.group(1), int(match.group(2)), int(match.group(3)))
