"""
Exceptions raised at the boundary of the curve evaluation.
The evaluation formulas themselves are total and never raise.
"""


class ParamError(Exception):
    pass
