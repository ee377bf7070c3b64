import streamlit as st

def render_sidebar():
    """
    Renders a clean sidebar with links to the editor and the symbol reference.
    """
    with st.sidebar:
        st.page_link("Home.py", label="Formula Editor", icon="✏️", use_container_width=True)
        st.page_link("pages/1_Symbol_Reference.py", label="Symbol Reference", icon="📖", use_container_width=True)
        st.markdown("---")
