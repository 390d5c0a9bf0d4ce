from .dictionary import Dictionary, default_dictionary
from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_json

__all__ = ["Dictionary", "default_dictionary", "validate_wordlist", "pretty_summary"]
