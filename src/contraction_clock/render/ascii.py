"""ASCII timeline rendering for terminal display."""

from contraction_clock.constants import TimelineLayoutConstants as TLC
from contraction_clock.models.frame import Frame
from contraction_clock.models.segments import BumpSegment, GapSegment
from contraction_clock.timeline.curve import intensity_ticks, intensity_to_y, shape
from contraction_clock.utils.formatting import format_duration

EMPTY_STATE_TEXT = "Run 'contraction-clock start' when a contraction begins"


class AsciiTimelineRenderer:
    """Render a timeline frame as ASCII art for terminal display."""

    def __init__(
        self,
        width: int = 80,
        height: int = 11,
        px_per_column: float = TLC.PX_PER_SECOND,
    ):
        """
        Initialize renderer.

        Args:
            width: Chart width in characters (default: 80)
            height: Chart height in lines, including the baseline (default: 11)
            px_per_column: Layout pixels covered by one character column
        """
        self.width = width
        self.height = max(2, height)
        self.px_per_column = px_per_column
        self.y_label_width = 6

    @property
    def chart_columns(self) -> int:
        return max(1, self.width - self.y_label_width - 1)

    def viewport_width(self) -> float:
        """Viewport width in layout pixels, axis included."""
        return TLC.Y_AXIS_WIDTH + self.chart_columns * self.px_per_column

    def render(self, frame: Frame) -> str:
        """
        Generate an ASCII representation of the timeline.

        Args:
            frame: Frame built with ``viewport_width=self.viewport_width()``

        Returns:
            ASCII art string
        """
        columns = self.chart_columns
        levels = [self._level_at(frame, col) for col in range(columns)]
        labels = self._axis_labels()
        lines = []

        for row in range(self.height):
            line = labels.get(row, "").rjust(5) + " │"

            for col in range(columns):
                level, active = levels[col]
                if level is None:
                    line += "─" if row == self.height - 1 else " "
                    continue

                point_row = self._row_for_y(intensity_to_y(level))
                if row == point_row:
                    line += "◆" if active else "●"
                elif row > point_row:
                    line += "░"
                else:
                    line += " "

            lines.append(line)

        lines.append(" " * self.y_label_width + "└" + "─" * columns)
        lines.append(" " * (self.y_label_width + 1) + self._label_line(frame))

        if frame.is_empty:
            lines.append("")
            lines.append(EMPTY_STATE_TEXT.center(self.width))

        return "\n".join(lines)

    def _column_x(self, frame: Frame, col: int) -> float:
        """Layout x coordinate at the centre of a character column."""
        screen_x = TLC.Y_AXIS_WIDTH + (col + 0.5) * self.px_per_column
        return screen_x - frame.pan_offset

    def _level_at(self, frame: Frame, col: int) -> tuple[float | None, bool]:
        """Curve height (0-10) at a column, None where no bump is drawn."""
        x = self._column_x(frame, col)
        seg = frame.layout.segment_at(x)
        if not isinstance(seg, BumpSegment) or seg.width <= 0:
            return None, False

        t = (x - seg.x) / seg.width
        return shape(t) * seg.intensity * 10, seg.active

    def _row_position(self, y: float) -> float:
        """Fractional text row for a plot y coordinate; 0 is the top row."""
        fraction = (y - TLC.PEAK_PADDING) / (TLC.PLOT_HEIGHT - TLC.PEAK_PADDING)
        return fraction * (self.height - 1)

    def _row_for_y(self, y: float) -> int:
        return round(self._row_position(y))

    def _axis_labels(self) -> dict[int, str]:
        """
        Intensity tick labels by row.

        When several ticks share a row (short charts), the one drawn closest
        to it is kept.
        """
        best: dict[int, tuple[float, int]] = {}
        for tick, y in intensity_ticks():
            position = self._row_position(y)
            row = round(position)
            distance = abs(position - row)
            if row not in best or distance < best[row][0]:
                best[row] = (distance, tick)
        return {row: str(tick) for row, (_, tick) in best.items()}

    def _label_line(self, frame: Frame) -> str:
        """Rest and duration labels centred under their segments."""
        columns = self.chart_columns
        chars = [" "] * columns

        for seg in frame.layout.segments:
            if isinstance(seg, GapSegment):
                text = seg.label
            elif not seg.active:
                text = format_duration(seg.duration_ms)
            else:
                text = None
            if not text:
                continue

            centre_x = seg.x + seg.width / 2 + frame.pan_offset
            centre_col = int((centre_x - TLC.Y_AXIS_WIDTH) / self.px_per_column)
            start = centre_col - len(text) // 2
            end = start + len(text)
            if start < 0 or end > columns:
                continue
            # one blank column on each side keeps labels apart
            lo, hi = max(0, start - 1), min(columns, end + 1)
            if any(c != " " for c in chars[lo:hi]):
                continue
            chars[start:end] = list(text)

        return "".join(chars).rstrip()
