"""JSON formatter for codetally."""

import json

from ..models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        data = {
            "root": str(result.root_dir),
            "root_namespaces": list(result.root_namespaces),
            "files": [r.to_dict(result.root_dir) for r in result.sorted_reports()],
            "name_collisions": {
                name: [str(p.relative_to(result.root_dir)) for p in paths]
                for name, paths in sorted(result.name_collisions.items())
            },
        }
        return json.dumps(data, indent=2)
