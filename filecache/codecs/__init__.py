"""File codecs keyed by format."""

from . import csv_codec, json_codec
from .codec_base import DecodeResult

__all__ = ["DecodeResult", "csv_codec", "json_codec"]
