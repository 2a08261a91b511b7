"""Data models for codetally results"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .scanning.lines import LineCount


@dataclass
class FileReport:
    """Final analysis output for one file"""

    path: Path
    source_lines: LineCount
    enhanced_lines: Optional[LineCount]
    dependencies: List[str]
    direct_dependencies: List[str] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    root_namespace: Optional[str] = None

    @property
    def name(self) -> str:
        return self.path.name

    def to_dict(self, root_dir: Optional[Path] = None) -> dict:
        path = self.path
        if root_dir is not None:
            try:
                path = self.path.relative_to(root_dir)
            except ValueError:
                pass
        return {
            "file": self.name,
            "path": str(path),
            "root_namespace": self.root_namespace,
            "source_lines": self.source_lines.as_int(),
            "source_lines_error": _failure_name(self.source_lines),
            "enhanced_lines": self.enhanced_lines.as_int() if self.enhanced_lines else None,
            "enhanced_lines_error": _failure_name(self.enhanced_lines),
            "dependencies": list(self.dependencies),
            "direct_dependencies": list(self.direct_dependencies),
        }


def _failure_name(count: Optional[LineCount]) -> Optional[str]:
    if count is None or count.failure is None:
        return None
    return count.failure.name.lower()


@dataclass
class AnalysisResult:
    """Everything one run produced.

    ``reports`` is keyed by full path. ``name_collisions`` lists every file
    name shared by more than one path, with the paths in walk order.
    """

    root_dir: Path
    root_namespaces: List[str]
    reports: Dict[Path, FileReport] = field(default_factory=dict)
    name_collisions: Dict[str, List[Path]] = field(default_factory=dict)

    def by_name(self) -> Dict[str, FileReport]:
        """Reports keyed by bare file name.

        Colliding names keep the file walked last; see ``name_collisions``.
        """
        return {report.name: report for report in self.reports.values()}

    def sorted_reports(self) -> List[FileReport]:
        return sorted(self.reports.values(), key=lambda r: (r.name, str(r.path)))

    @property
    def failed_files(self) -> List[Path]:
        return [path for path, report in self.reports.items() if not report.source_lines.ok]
