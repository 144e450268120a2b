"""Testing helpers for code built on mp_phonemeta."""
