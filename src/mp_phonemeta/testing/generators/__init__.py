"""Testing generators – Hypothesis strategies (requires ``hypothesis``)."""
from mp_phonemeta.testing.generators.strategies import possible_lengths_strategy

__all__ = ["possible_lengths_strategy"]
