"""Shared test fixtures for the pod manifest linter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pytest

from pod_manifest_linter import lint_string

VALID_POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
  namespace: default
  labels:
    app: web
spec:
  os: linux
  containers:
    - name: my_app
      image: registry.bigbrother.io/app:1.2.3
      ports:
        - containerPort: 8080
          protocol: TCP
      readinessProbe:
        httpGet:
          path: /healthz
          port: 8080
      livenessProbe:
        httpGet:
          path: /live
          port: 8081
      resources:
        limits:
          cpu: 2
          memory: 512Mi
        requests:
          cpu: 1
          memory: 256Mi
"""

MINIMAL_POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
spec:
  containers:
    - name: app
      image: registry.bigbrother.io/app:latest
      resources: {}
"""


def located(content: str) -> List[Tuple[Optional[int], str]]:
    """Lint ``content`` and return (line, message) pairs in report order."""
    return [(d.line, d.message) for d in lint_string(content).errors]


def messages(content: str) -> List[str]:
    return [d.message for d in lint_string(content).errors]


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(content: str, name: str = "pod.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
