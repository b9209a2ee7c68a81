"""
storage
-------

Flat-file persistence for shifts and medical tests (CSV through pandas).
"""
