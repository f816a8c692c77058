"""Kernel types – identifier helpers."""
from librarium.kernel.types.ids import format_id_list, new_id, parse_id, parse_id_list

__all__ = ["format_id_list", "new_id", "parse_id", "parse_id_list"]
