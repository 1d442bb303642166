"""A stack of equally sized integer matrices."""


class NMatrix:
    """``count`` matrices, each with ``columns`` rows of ``lines`` values."""

    def __init__(self, lines, columns, count):
        if lines <= 0 or columns <= 0 or count <= 0:
            raise ValueError("matrix dimensions must all be positive")
        self.lines = lines
        self.columns = columns
        self.count = count
        self.values = [
            [[0] * lines for _ in range(columns)] for _ in range(count)
        ]

    def _fill(self, value_at):
        for layer in self.values:
            for y, row in enumerate(layer):
                for x in range(self.lines):
                    row[x] = value_at(y * self.lines + x)
        return self

    def fill_zero(self):
        """Set every value to 0."""
        return self._fill(lambda _: 0)

    def fill_one(self):
        """Set every value to 1."""
        return self._fill(lambda _: 1)

    def fill_one_zero(self):
        """Alternate 0 and 1 across each matrix, starting with 0."""
        return self._fill(lambda position: position % 2)

    def render(self):
        """Return the textual listing of every matrix."""
        parts = []
        for number, layer in enumerate(self.values, start=1):
            parts.append(f"Matrix number {number} :\n")
            for row in layer:
                cells = [f" {value}  -  " for value in row[:-1]]
                cells.append(f" {row[-1]}  |  ")
                parts.append("".join(cells) + "\n")
            parts.append("End of the matrix\n")
            parts.append("---- ~~~~ ----\n")
        return "".join(parts)