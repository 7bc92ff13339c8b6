"""Core conversion modules: record model, formats, detection, orchestration.

WHY: The core holds everything with real design content — the intermediate
record model, the format table, the detection heuristic and the convert()
pipeline. The CLI and HTTP API only move bytes in and out of it.

HOW: records.py defines the Record Set model, formats.py the closed format
enum and descriptor table, detector.py the sniffing heuristic, errors.py the
exception hierarchy and converter.py the orchestrator.

RULES:
- No file-system access, no logging, no shared mutable state
- Every failure is raised as a ConversionError subclass
"""
