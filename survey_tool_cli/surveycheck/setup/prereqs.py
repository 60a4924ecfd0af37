"""Host prerequisite check: can this machine run the Survey Tool application?

The Survey Tool is a Kotlin JVM application with a Compose desktop runtime,
so only Windows and Linux hosts with a recent Java are supported.
"""

from __future__ import annotations

import logging
import os
import platform
import re
import subprocess
from pathlib import Path

from surveycheck.checker.models import ValidationReport
from surveycheck.checker.report import ReportAggregator
from surveycheck.config import Settings

logger = logging.getLogger(__name__)

SUPPORTED_SYSTEMS = {"Windows", "Linux"}

# e.g. "openjdk 21.0.2 2024-01-16"
JAVA_VERSION_RE = re.compile(r" (\d+)\.(\d+)\.(\d+) ")


def _run_java_version(java: str) -> str | None:
    """Run ``<java> --version`` and return its stdout, or None on any failure."""
    try:
        proc = subprocess.run(
            [java, "--version"], capture_output=True, text=True, timeout=30,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Running %s failed: %s", java, e)
        return None
    if proc.returncode != 0:
        logger.debug("%s --version exited with %d", java, proc.returncode)
        return None
    return proc.stdout


def find_java_version_output() -> str | None:
    """Try ``java`` on the PATH first, then ``$JAVA_HOME/bin/java``."""
    output = _run_java_version("java")
    if output is not None:
        return output

    java_home = os.environ.get("JAVA_HOME")
    if not java_home:
        return None
    return _run_java_version(str(Path(java_home) / "bin" / "java"))


def check_host(settings: Settings | None = None) -> ValidationReport:
    """Check operating system support and the installed Java version."""
    settings = settings or Settings()
    minimum = settings.min_java_version
    report = ReportAggregator.start_optimistic()

    system = platform.system()
    if system in SUPPORTED_SYSTEMS:
        report.record_success("Supported operating system found")
    else:
        report.record_structural_failure(
            f"Only Windows and Linux supported as operating system. Found '{system}'"
        )

    output = find_java_version_output()
    if output is None:
        report.record_structural_failure("Java not found. Please install Java or set JAVA_HOME")
        report.record_structural_failure("Java not found. Cannot check its version")
        return report.finish()

    report.record_success("Java installation found")

    match = JAVA_VERSION_RE.search(output)
    if match is None:
        report.record_structural_failure("Could not detect any Java version")
        report.set_output(output)
        return report.finish()

    found = match.group(0).strip()
    if int(match.group(1)) < minimum:
        report.record_structural_failure(
            f"Installed Java version too low. Minimum needed: {minimum} - found: {found}"
        )
    else:
        report.record_success(
            f"Installed Java version good. Minimum needed: {minimum} - found: {found}"
        )
    return report.finish()
