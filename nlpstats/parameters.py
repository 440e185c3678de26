"""
Formatting parameters for tabular and text output
"""


class DisplayParameters:
    """
    Configuration of the fixed-width formats used by nlpstats.

    The defaults make ``statshead`` and ``statsline`` output line up as
    columns; change them only consistently for a whole table.

    Attributes
    ----------
    int_width : int
        Width of integer fields (default: 7)
    real_width : int
        Width of real fields (default: 15)
    real_digits : int
        Digits after the decimal point of real fields (default: 8)
    text_width : int
        Width of text fields such as the status (default: 8)
    separator : str
        Column separator (default: two spaces)
    vector_max_len : int
        Longest vector shown in full (default: 5)
    vector_head : int
        Leading elements shown for longer vectors (default: 4)
    empty_glyph : str
        Representation of an empty vector (default: '∅')
    ellipsis_glyph : str
        Marker for elided vector elements (default: '⋯')

    Examples
    --------
    >>> params = DisplayParameters()
    >>> params.real_digits = 3
    >>> params.real_width = 10
    """

    def __init__(self):
        self.int_width = 7
        self.real_width = 15
        self.real_digits = 8
        self.text_width = 8
        self.separator = "  "
        self.vector_max_len = 5
        self.vector_head = 4
        self.empty_glyph = "∅"
        self.ellipsis_glyph = "⋯"

    def __repr__(self):
        return (f"DisplayParameters(int_width={self.int_width}, "
                f"real_width={self.real_width}, "
                f"real_digits={self.real_digits}, "
                f"text_width={self.text_width})")

    def int_format(self, value) -> str:
        return f"{int(value):{self.int_width}d}"

    def real_format(self, value) -> str:
        return f"{float(value):{self.real_width}.{self.real_digits}e}"

    def text_format(self, value) -> str:
        return f"{value!s:>{self.text_width}}"

    @classmethod
    def from_dict(cls, d):
        """Create DisplayParameters from dictionary"""
        param = cls()
        for key, value in d.items():
            if hasattr(param, key):
                setattr(param, key, value)
        return param

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'int_width': self.int_width,
            'real_width': self.real_width,
            'real_digits': self.real_digits,
            'text_width': self.text_width,
            'separator': self.separator,
            'vector_max_len': self.vector_max_len,
            'vector_head': self.vector_head,
            'empty_glyph': self.empty_glyph,
            'ellipsis_glyph': self.ellipsis_glyph,
        }
