"""
core
----

Domain records and the registries that own them:

- Shift & ShiftRegistry:
  Time-blocked work assignments, with the overlap and ordering rules applied
  on every add and edit.

- MedicalTest & MedicalTestRegistry:
  Test results recorded per patient.

- Outcome & ParseResult:
  Values returned by registries and parsers instead of raising on expected,
  user-facing failures.
"""
