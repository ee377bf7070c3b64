from types import MappingProxyType
from typing import Optional

# --- Greek ---
GREEK_LETTERS = {
    'Alpha': 'Α', 'Beta': 'Β', 'Gamma': 'Γ', 'Delta': 'Δ',
    'Epsilon': 'Ε', 'Zeta': 'Ζ', 'Eta': 'Η', 'Theta': 'Θ',
    'Iota': 'Ι', 'Kappa': 'Κ', 'Lambda': 'Λ', 'Mu': 'Μ',
    'Nu': 'Ν', 'Xi': 'Ξ', 'Omicron': 'Ο', 'Pi': 'Π',
    'Rho': 'Ρ', 'Sigma': 'Σ', 'Tau': 'Τ', 'Upsilon': 'Υ',
    'Phi': 'Φ', 'Chi': 'Χ', 'Psi': 'Ψ', 'Omega': 'Ω',

    'alpha': 'α', 'beta': 'β', 'gamma': 'γ', 'delta': 'δ',
    'epsilon': 'ε', 'zeta': 'ζ', 'eta': 'η', 'theta': 'θ',
    'iota': 'ι', 'kappa': 'κ', 'lambda': 'λ', 'mu': 'μ',
    'nu': 'ν', 'xi': 'ξ', 'omicron': 'ο', 'pi': 'π',
    'rho': 'ρ', 'sigma': 'σ', 'tau': 'τ', 'upsilon': 'υ',
    'phi': 'φ', 'chi': 'χ', 'psi': 'ψ', 'omega': 'ω',
    'varepsilon': 'ϵ', 'vartheta': 'ϑ', 'varphi': 'ϕ',
}

# --- Relations & Operators ---
OPERATORS = {
    'infty': '∞', 'approx': '≈', 'neq': '≠', 'ne': '≠',
    'le': '≤', 'leq': '≤', 'ge': '≥', 'geq': '≥',
    'pm': '±', 'mp': '∓', 'cdot': '∙', 'times': '×', 'div': '÷',
    'to': '→', 'rightarrow': '→', 'leftarrow': '←', 'Rightarrow': '⇒',
    'in': '∈', 'notin': '∉', 'subset': '⊂', 'cup': '∪', 'cap': '∩',
    'partial': '∂', 'nabla': '∇', 'equiv': '≡', 'sim': '∼',
    'cdots': '⋯', 'ldots': '…', 'degree': '°',
    "'": "'", '{': '{', '}': '}',
}

# --- Spacing ---
# \, and \! are kerning commands handled by the parser; their entries here are empty.
SPACING = {
    'thinspace': ' ',
    'quad': '  ',
    ' ': ' ',
    '!': '',
    ',': '',
}

SYMBOLS = MappingProxyType({**GREEK_LETTERS, **OPERATORS, **SPACING})


def lookup(name: str) -> Optional[str]:
    """Replacement glyph for a command name, or None if the command is not a symbol."""
    return SYMBOLS.get(name)
