import streamlit as st
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from mathbox.engine import FormulaConfig, render_svg
from mathbox.nav import render_sidebar
from mathbox.parser import FUNCTIONS
from mathbox.symbols import GREEK_LETTERS, OPERATORS, SPACING, lookup

st.set_page_config(layout="wide", page_title="Symbol Reference")
render_sidebar()

st.title("📖 Symbol Reference")

query = st.text_input("Look up a command", "alpha")
if query:
    name = query.lstrip("\\")
    glyph = lookup(name)
    if glyph is None:
        st.warning(f"\\{name} is not in the symbol table and renders as '?'.")
    else:
        st.markdown(render_svg("\\" + name, FormulaConfig(padding=10, extra_bottom=0)), unsafe_allow_html=True)


def symbol_rows(table):
    return [{"Command": f"\\{name}", "Glyph": glyph if glyph.strip() else repr(glyph)}
            for name, glyph in table.items()]


col1, col2 = st.columns(2)
with col1:
    st.subheader("Greek Letters")
    st.dataframe(symbol_rows(GREEK_LETTERS), use_container_width=True, hide_index=True)

with col2:
    st.subheader("Operators & Relations")
    st.dataframe(symbol_rows(OPERATORS), use_container_width=True, hide_index=True)

    st.subheader("Spacing")
    st.dataframe(symbol_rows(SPACING), use_container_width=True, hide_index=True)

    st.subheader("Functions")
    st.markdown(" ".join(f"`\\{f}`" for f in FUNCTIONS))

    st.subheader("Structures")
    st.markdown(r"""
* `\frac{a}{b}` fraction
* `\sqrt{x}`, `\sqrt[n]{x}` radicals
* `x^{a}`, `x_{b}` scripts
* `\sum`, `\prod`, `\lim`, `\int` with `_` / `^` limits
* `\left( ... \right)` scaling fences: `( ) [ ] |`
* `\mathrm{text}` upright text, `\,` / `\!` spacing
""")
