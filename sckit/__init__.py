"""Small toolkit of JSON, config, CSV, logging, container and text helpers."""

__version__ = "0.1.0"
__all__ = [
    "bstree",
    "cjson",
    "common",
    "config",
    "csvfile",
    "linkedlist",
    "log",
    "textutil",
]