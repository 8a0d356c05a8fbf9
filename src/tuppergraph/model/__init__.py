from tuppergraph.model.decoder import (
    InvalidInput, decode, decode_text, encode, formula_pixel, parse_k, to_bit_string,
)
from tuppergraph.model.state import Action, PlotState, clear, dispatch, plot, set_text
