from hilite.tokenizer.base import UNDEFINED_RESULT, Tokenizer
from hilite.tokenizer.pygments_tokenizer import HljsSpanFormatter, PygmentsTokenizer

__all__ = ["UNDEFINED_RESULT", "Tokenizer", "HljsSpanFormatter", "PygmentsTokenizer"]
