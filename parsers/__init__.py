"""
parsers
-------

Turn free-text command lines into validated intents.

- `tokenizer`: normalization and the two marker extraction strategies.
- `shift_parser`: `shift ...` commands.
- `medical_test_parser`: `test ...` commands.
"""
