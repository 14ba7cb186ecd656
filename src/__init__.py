"""
Package marker for the task tracker service code under `src`.
The HTTP API lives in `src.api`; process-wide helpers such as logging setup live in `src.common`.
"""
