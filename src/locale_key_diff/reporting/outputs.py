"""Machine-readable run outputs."""

import json
import os
import uuid
from typing import Any, Dict, Mapping, Optional

import structlog

from ..keys.models import ComparisonReports

logger = structlog.get_logger(__name__)


def reports_to_dict(reports: ComparisonReports) -> Dict[str, Dict[str, Any]]:
    """JSON-ready form of the comparison reports."""
    return {
        locale: {path: report.to_dict() for path, report in file_reports.items()}
        for locale, file_reports in reports.items()
    }


def set_output(name: str, value: Any, env: Optional[Mapping[str, str]] = None) -> bool:
    """Write a step output to the runner's output file.

    Returns:
        True if the output was written, False if no output file is configured
    """
    env = os.environ if env is None else env
    output_file = env.get("GITHUB_OUTPUT")
    serialized = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)

    if not output_file:
        logger.info("GITHUB_OUTPUT not set, skipping step output", name=name)
        return False

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_file, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{serialized}\n{delimiter}\n")

    logger.debug("Step output written", name=name, file=output_file)
    return True
