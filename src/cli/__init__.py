"""
Console entry point for CsvCompare.

Turns the parse Disposition into output and an exit status; option matching
lives in argmatch and the comparison itself in csvcompare.
"""
