from .validator import validate_wordlists, pretty_summary
from .corpus import load_answers, load_dictionary, load_word_counts, letter_frequencies

__all__ = ["validate_wordlists", "pretty_summary",
           "load_answers", "load_dictionary", "load_word_counts", "letter_frequencies"]
