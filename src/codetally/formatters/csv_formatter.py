"""CSV formatter for codetally."""

import csv
import io

from ..models import AnalysisResult
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Render reports as CSV; failed counts appear as their sentinels."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result), end="")

    def format(self, result: AnalysisResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["file", "path", "source_lines", "enhanced_lines", "dependencies"])
        for r in result.sorted_reports():
            writer.writerow([
                r.name,
                str(r.path.relative_to(result.root_dir)),
                r.source_lines.as_int(),
                r.enhanced_lines.as_int() if r.enhanced_lines else "",
                ";".join(r.dependencies),
            ])
        return output.getvalue()
