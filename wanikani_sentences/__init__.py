"""Core module exports for wanikani_sentences."""

from .config import DEFAULT_CONFIG, cfg_get, load_config
from .credentials import FileTokenStore, MemoryTokenStore, TokenStore, resolve_token
from .delivery import DirectorySink, MemorySink
from .errors import AuthError, InputError, NetworkError, SentenceFetcherError
from .exporter import ExportFile, ExportMode, ExportQueue, serialize
from .extractor import extract_sentences, group_subject
from .fetcher import SentenceLibrary, fetch_all, fetch_sentences
from .levels import format_levels, parse_levels
from .models import LevelResultMap, SentenceRecord, SubjectGroup, results_from_dict, results_to_dict

__all__ = [
    "AuthError",
    "DEFAULT_CONFIG",
    "DirectorySink",
    "ExportFile",
    "ExportMode",
    "ExportQueue",
    "FileTokenStore",
    "InputError",
    "LevelResultMap",
    "MemorySink",
    "MemoryTokenStore",
    "NetworkError",
    "SentenceFetcherError",
    "SentenceLibrary",
    "SentenceRecord",
    "SubjectGroup",
    "TokenStore",
    "cfg_get",
    "extract_sentences",
    "fetch_all",
    "fetch_sentences",
    "format_levels",
    "group_subject",
    "load_config",
    "parse_levels",
    "resolve_token",
    "results_from_dict",
    "results_to_dict",
    "serialize",
]
