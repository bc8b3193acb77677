from schemer.reader.tokenizer import Token, tokenize
from schemer.reader.parser import Parser, TokenStream, parse

__all__ = ["Token", "tokenize", "Parser", "TokenStream", "parse"]
