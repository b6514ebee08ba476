"""
Report generators for conversion runs.

Formats results for console and JSON output.
"""

import json
from pathlib import Path
from typing import Any, Dict

from gpx2js.features.tracks.service import ConversionReport
from gpx2js.shared.formatters import format_count, format_distance_km


class ReportGenerator:
    """Generate run reports in various formats."""

    def generate_console(self, report: ConversionReport) -> str:
        """Generate ASCII summary for console output."""
        lines = [
            "",
            "=" * 70,
            "                      CONVERSION REPORT",
            "=" * 70,
            "",
            f"Input:          {report.input_dir}",
            f"Output:         {report.output_dir}",
            f"Run at:         {report.run_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Files:          {len(report.converted)}/{len(report.results)} converted"
            f" (failed: {len(report.failures)}, redundant: {len(report.redundant)})",
            f"Skip list:      {format_count(len(report.skipped_names), 'name')}",
            f"Points:         {report.total_points_written} written"
            f" of {report.total_points_parsed} parsed",
            f"Distance:       {format_distance_km(report.total_distance_km)}",
        ]

        if report.results:
            lines.extend([
                "",
                "-" * 70,
                f"{'File':<36} | {'Status':<9} | {'Points':>7} | {'Distance':>9}",
                "-" * 70,
            ])
            for r in report.results:
                name = r.name if len(r.name) <= 36 else r.name[:33] + "..."
                lines.append(
                    f"{name:<36} | {r.status.value:<9} | {r.points_written:>7} | "
                    f"{format_distance_km(r.distance_km):>9}"
                )

        lines.append("")
        return "\n".join(lines)

    def generate_failures(self, report: ConversionReport) -> str:
        """One line per failed file, for stderr."""
        lines = [f"{format_count(len(report.failures), 'file')} failed to convert:"]
        for r in report.failures:
            lines.append(f"  {r.name}: {r.error}")
        return "\n".join(lines)

    def generate_json(self, report: ConversionReport) -> Dict[str, Any]:
        """Generate JSON-serializable dict."""
        return {
            "meta": {
                "input_dir": str(report.input_dir),
                "output_dir": str(report.output_dir),
                "run_at": report.run_at.isoformat(),
                "skipped_names": report.skipped_names,
            },
            "summary": {
                "files": len(report.results),
                "converted": len(report.converted),
                "failed": len(report.failures),
                "redundant": len(report.redundant),
                "points_parsed": report.total_points_parsed,
                "points_written": report.total_points_written,
                "distance_km": round(report.total_distance_km, 3),
            },
            "files": [
                {
                    "name": r.name,
                    "status": r.status.value,
                    "points_parsed": r.points_parsed,
                    "points_written": r.points_written,
                    "distance_km": round(r.distance_km, 3),
                    "output": str(r.output_path) if r.output_path else None,
                    "error": r.error,
                }
                for r in report.results
            ],
        }

    def save_json(self, report: ConversionReport, path: Path) -> None:
        """Save report as JSON file."""
        data = self.generate_json(report)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
