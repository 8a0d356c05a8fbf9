"""Plot Tupper's self-referential formula for a given k."""
from tuppergraph.model.decoder import InvalidInput, decode, decode_text, encode, parse_k

__all__ = ["InvalidInput", "decode", "decode_text", "encode", "parse_k"]
