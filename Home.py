import streamlit as st
import sys
import os
from dataclasses import replace

# Add this directory to path to import mathbox
sys.path.append(os.path.dirname(__file__))

from mathbox.engine import FormulaEngine, FormulaConfig
from mathbox.nav import render_sidebar
from mathbox.viewer import render_formula_preview

st.set_page_config(
    page_title="MathBox Formula Editor",
    page_icon="✏️",
    layout="wide"
)

render_sidebar()

# --- CSS Tweaks ---
st.markdown("""
    <style>
        .block-container { padding-top: 2rem !important; padding-bottom: 1rem; }
        .stTextInput input { font-family: monospace; }
    </style>
""", unsafe_allow_html=True)

EXAMPLES = {
    "Quadratic formula": r"x=\frac{-b\pm\sqrt{b^2-4ac}}{2a}",
    "Series": r"\sum_{n=1}^{\infty}\frac{1}{n^2}=\frac{\pi^2}{6}",
    "Integral": r"\int_0^1 x^2\,\mathrm{d}x",
    "Limit": r"\lim_{x\to0}\frac{\sin x}{x}=1",
    "Nested fences": r"\left(\left[a+b\right]^2\right)",
    "Cube root": r"\sqrt[3]{\alpha+\beta}",
}

# --- SIDEBAR: Settings ---
st.sidebar.title("⚙️ Settings")
font_size = st.sidebar.slider("Font Size", 12, 72, FormulaConfig.font_size)
padding = st.sidebar.slider("Padding", 0, 100, FormulaConfig.padding)
color = st.sidebar.color_picker("Colour", "#000000")
stroke_width = st.sidebar.number_input("Stroke Width", 0.5, 5.0, FormulaConfig.stroke_width, step=0.5)

st.sidebar.markdown("### Examples")
example = st.sidebar.selectbox("Load Example", ["(none)"] + list(EXAMPLES))

cfg = replace(FormulaConfig(), font_size=font_size, padding=padding, color=color, stroke_width=stroke_width)

# --- MAIN LAYOUT ---
st.title("✏️ Formula Editor")

default_markup = EXAMPLES.get(example, EXAMPLES["Quadratic formula"])
markup = st.text_input("LaTeX Input", default_markup)

# Re-parse from scratch on every edit.
engine = FormulaEngine(markup, cfg)
svg_string = engine.get_svg_string()

render_formula_preview(svg_string, engine.width_pixels, engine.height_pixels)

c_name, c_save = st.columns([3, 1])
file_name = c_name.text_input("File Name", "formula")
c_save.download_button(
    "💾 Save SVG",
    data=svg_string,
    file_name=f"{file_name or 'formula'}.svg",
    mime="image/svg+xml",
    use_container_width=True,
)

with st.expander("Save to Disk"):
    out_dir = st.text_input("Folder", os.getcwd())
    if st.button("Write File"):
        try:
            saved = engine.save(os.path.join(out_dir, f"{file_name or 'formula'}.svg"))
            st.success(f"File saved: {saved}")
        except OSError as e:
            st.error(f"Error saving file: {e}")

with st.expander("Layout Details"):
    st.write(f"Box: width {engine.root.width}, height {engine.root.height}, ascent {engine.root.ascent}")
    st.write(f"Canvas: {engine.width_pixels} × {engine.height_pixels} px")
    st.code(svg_string, language="xml")

st.markdown("---")
st.caption("MathBox v1.0")
