# --- Font Metrics (Times New Roman Approximation) ---
# Advance widths in em. Multiply by the font size for device units.

DEFAULT_WIDTH = 0.5

CHAR_WIDTHS_NORMAL = {
    'a': 0.45, 'b': 0.5, 'c': 0.45, 'd': 0.5, 'e': 0.45, 'f': 0.35, 'g': 0.5,
    'h': 0.5, 'i': 0.28, 'j': 0.28, 'k': 0.5, 'l': 0.28, 'm': 0.78, 'n': 0.5,
    'o': 0.5, 'p': 0.5, 'q': 0.5, 'r': 0.34, 's': 0.39, 't': 0.28, 'u': 0.5,
    'v': 0.5, 'w': 0.72, 'x': 0.5, 'y': 0.5, 'z': 0.45,
    'A': 0.72, 'B': 0.67, 'C': 0.67, 'D': 0.72, 'E': 0.61, 'F': 0.56, 'G': 0.72,
    'H': 0.72, 'I': 0.34, 'J': 0.39, 'K': 0.72, 'L': 0.61, 'M': 0.89, 'N': 0.72,
    'O': 0.72, 'P': 0.56, 'Q': 0.72, 'R': 0.67, 'S': 0.56, 'T': 0.61, 'U': 0.72,
    'V': 0.72, 'W': 0.94, 'X': 0.72, 'Y': 0.72, 'Z': 0.61,
    '0': 0.5, '1': 0.5, '2': 0.5, '3': 0.5, '4': 0.5, '5': 0.5, '6': 0.5, '7': 0.5, '8': 0.5, '9': 0.5,
    '.': 0.25, ',': 0.25, ';': 0.28, ':': 0.28, '!': 0.33, '?': 0.45, "'": 0.18,
    '(': 0.33, ')': 0.33, '[': 0.33, ']': 0.33, '{': 0.48, '}': 0.48, '|': 0.2,
    '+': 0.56, '-': 0.33, '=': 0.56, '<': 0.56, '>': 0.56, '/': 0.28, '\\': 0.28, '*': 0.5,
    ' ': 0.25, '−': 0.56,
    # Greek
    'α': 0.53, 'β': 0.5, 'γ': 0.45, 'δ': 0.48, 'ε': 0.42, 'ϵ': 0.42, 'ζ': 0.44, 'η': 0.5,
    'θ': 0.48, 'ϑ': 0.52, 'ι': 0.28, 'κ': 0.5, 'λ': 0.5, 'μ': 0.52, 'ν': 0.47, 'ξ': 0.44,
    'ο': 0.5, 'π': 0.52, 'ρ': 0.5, 'σ': 0.53, 'τ': 0.42, 'υ': 0.48, 'φ': 0.6, 'ϕ': 0.55,
    'χ': 0.5, 'ψ': 0.64, 'ω': 0.66,
    'Α': 0.72, 'Β': 0.67, 'Γ': 0.58, 'Δ': 0.63, 'Ε': 0.61, 'Ζ': 0.61, 'Η': 0.72, 'Θ': 0.72,
    'Ι': 0.34, 'Κ': 0.72, 'Λ': 0.7, 'Μ': 0.89, 'Ν': 0.72, 'Ξ': 0.64, 'Ο': 0.72, 'Π': 0.72,
    'Ρ': 0.56, 'Σ': 0.6, 'Τ': 0.61, 'Υ': 0.72, 'Φ': 0.76, 'Χ': 0.72, 'Ψ': 0.78, 'Ω': 0.77,
    # Operators
    '∑': 0.71, '∫': 0.27, '∞': 0.71, '≈': 0.55, '≠': 0.55, '≤': 0.55, '≥': 0.55,
    '±': 0.55, '∓': 0.55, '∙': 0.25, '×': 0.56, '÷': 0.55, '→': 1.0, '←': 1.0, '⇒': 1.0,
    '∈': 0.71, '∉': 0.71, '⊂': 0.71, '∪': 0.76, '∩': 0.76, '∂': 0.49, '∇': 0.71,
    '≡': 0.55, '∼': 0.55, '⋯': 1.0, '…': 1.0, '°': 0.4,
}

# Italic glyphs are slightly narrower in the lowercase and wider in the capitals.
CHAR_WIDTHS_ITALIC = dict(CHAR_WIDTHS_NORMAL)
CHAR_WIDTHS_ITALIC.update({
    'a': 0.5, 'b': 0.5, 'c': 0.44, 'd': 0.5, 'e': 0.44, 'f': 0.28, 'g': 0.5,
    'h': 0.5, 'i': 0.28, 'j': 0.28, 'k': 0.44, 'l': 0.28, 'm': 0.72, 'n': 0.5,
    'o': 0.5, 'p': 0.5, 'q': 0.5, 'r': 0.39, 's': 0.39, 't': 0.28, 'u': 0.5,
    'v': 0.44, 'w': 0.67, 'x': 0.44, 'y': 0.44, 'z': 0.39,
    'A': 0.61, 'B': 0.61, 'C': 0.67, 'D': 0.72, 'E': 0.61, 'F': 0.61, 'G': 0.72,
    'H': 0.72, 'I': 0.33, 'J': 0.44, 'K': 0.67, 'L': 0.56, 'M': 0.83, 'N': 0.67,
    'O': 0.72, 'P': 0.61, 'Q': 0.72, 'R': 0.61, 'S': 0.5, 'T': 0.56, 'U': 0.72,
    'V': 0.61, 'W': 0.83, 'X': 0.61, 'Y': 0.56, 'Z': 0.56,
})


def get_char_width(char: str, font_size: float, italic: bool = False) -> float:
    table = CHAR_WIDTHS_ITALIC if italic else CHAR_WIDTHS_NORMAL
    return table.get(char, DEFAULT_WIDTH) * font_size


def get_text_width(text: str, font_size: float, italic: bool = False) -> float:
    return sum(get_char_width(char, font_size, italic) for char in text)
