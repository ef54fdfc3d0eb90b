"""QC print generator.

Turns the B/C columns of a spreadsheet into numbered, alphabetically ordered,
print-ready pages (two 50-row columns per page).
"""

__version__ = "0.1.0"
