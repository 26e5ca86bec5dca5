"""
sdrf2graph Web Drawer
A Streamlit web application for drawing investigation design graphs from SDRF sheets of MAGE-tab spreadsheets.
"""

import streamlit as st
import tempfile
import os
from pathlib import Path
import pandas as pd
from openpyxl import load_workbook
import warnings
from io import BytesIO
import gc

from sdrf2graph import sdrf
from sdrf2graph.convert_sdrf_to_graph import sdrf_to_dot
from sdrf2graph.graphviz_renderer import render_graph
from sdrf2graph.spreadsheet_reader import list_sheet_names

# Suppress openpyxl warnings
warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')

# Page configuration
st.set_page_config(
    page_title="sdrf2graph",
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
    <style>
    .main-header {
        font-weight: bold;
        color: #1f77b4;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        color: #666;
        margin-bottom: 2rem;
    }
    .success-box {
        padding: 1rem;
        border-radius: 0.5rem;
        background-color: #d4edda;
        border: 1px solid #c3e6cb;
        color: #155724;
        margin: 1rem 0;
    }
    </style>
""", unsafe_allow_html=True)

# Header
st.markdown('<p class="main-header">🧪 sdrf2graph</p>', unsafe_allow_html=True)
st.markdown('<p class="sub-header">Draw an investigation design graph from the SDRF sheets of a MAGE-tab spreadsheet (*.xlsx).</p>', unsafe_allow_html=True)

with st.sidebar:
    st.header("ℹ️ About")
    st.markdown("""
    Each `* Name` column is a node and each `Protocol REF` column is an edge.
    `* File` and `* Data` columns are also nodes.

    - `Characteristics [..]` are shown on nodes
    - `Parameter Value [..]` are shown on edges
    - a `URI`/`URL`/`FTP` column right of a node or protocol links it (SVG only)
    """)
    st.header("⚠️ Limitations")
    st.markdown("""
    Gaps (`->`) in the node chain are not supported.
    Split such SDRFs into separate sheets instead.
    """)

uploaded_xlsx = st.file_uploader(
    "Upload MAGE-tab spreadsheet (.xlsx) or tab-delimited SDRF (.txt)",
    type=["xlsx", "txt", "tsv"],
    key="sdrf_upload",
)

col1, col2 = st.columns([2, 1])
with col2:
    st.markdown("### Options")
    output_format = st.selectbox("Draw as", ["svg", "png", "dot"], index=0, key="output_format")
    sheet_name = st.text_input(
        "From sheets",
        value=sdrf.DEFAULT_SHEET_NAME,
        key="sheet_name",
        help="Part of the sheet names. '|' separates alternatives, e.g. 'sdrf-kd|sdrf-seq'. Leave empty to use all sheets."
    )
    layout = st.radio("Layout", sdrf.LAYOUTS, index=1, key="layout")
    edge_label = st.checkbox("Show protocols on edges", value=True, key="edge_label")

if uploaded_xlsx is not None:
    file_content = uploaded_xlsx.getvalue()
    suffix = Path(uploaded_xlsx.name).suffix.lower()

    with col1:
        if suffix in sdrf.XLSX_SUFFIXES:
            with st.expander("📊 Preview Uploaded Spreadsheet", expanded=False):
                try:
                    wb = load_workbook(BytesIO(file_content), read_only=True, data_only=True)
                    for title in wb.sheetnames:
                        st.subheader(f"Sheet: {title}")
                        data = []
                        max_preview_rows = 50
                        for idx, row in enumerate(wb[title].iter_rows(values_only=True)):
                            if idx >= max_preview_rows:
                                break
                            data.append(row)
                        if data:
                            max_cols = max(len(row) for row in data)
                            padded_data = [list(row) + [None] * (max_cols - len(row)) for row in data]
                            # SDRF headers repeat (Protocol REF), so keep them as the first row
                            df = pd.DataFrame(padded_data)
                            st.dataframe(df, use_container_width=True)
                            del df, padded_data, data
                        else:
                            st.info("Sheet is empty")
                    wb.close()
                    del wb
                    gc.collect()
                except Exception as e:
                    st.error(f"Error previewing spreadsheet: {str(e)}")

    if st.button("✏️ Draw", type="primary", key="draw"):
        with st.spinner("Drawing..."):
            input_path = None
            try:
                with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as tmp_in:
                    tmp_in.write(file_content)
                    input_path = tmp_in.name

                st.caption(f"Sheets in file: {', '.join(list_sheet_names(input_path))}")
                dot_text, stats = sdrf_to_dot(input_path, sheet_name=sheet_name, layout=layout, edge_label=edge_label)

                st.markdown('<div class="success-box">✅ Drawing successful!</div>', unsafe_allow_html=True)

                info_msgs = [m for m in stats['warnings'] if m.startswith("Found ")]
                warning_msgs = [m for m in stats['warnings'] if m not in info_msgs]
                for msg in warning_msgs:
                    st.warning(msg)

                m1, m2, m3 = st.columns(3)
                m1.metric("Sheets", stats['sheets'])
                m2.metric("Nodes", stats['nodes'])
                m3.metric("Edges", stats['edges'])

                original_name = uploaded_xlsx.name.rsplit('.', 1)[0]
                if output_format == sdrf.FORMAT_DOT:
                    st.code(dot_text, language="dot")
                    data = dot_text
                else:
                    data = render_graph(dot_text, output_format)
                    if not data:
                        st.error("Graphviz produced no output. Try the DOT format.")
                    elif output_format == "svg":
                        st.image(data.decode("utf-8"), use_container_width=True)
                    else:
                        st.image(data, use_container_width=True)

                st.download_button(
                    label=f"⬇️ Download {output_format.upper()} File",
                    data=data,
                    file_name=f"{original_name}.{output_format}",
                    mime=sdrf.content_type_for(output_format),
                    type="primary"
                )
            except Exception as e:
                st.error(f"❌ Drawing failed: {str(e)}")
                import traceback
                with st.expander("Error Details"):
                    st.code(traceback.format_exc())
            finally:
                if input_path and os.path.exists(input_path):
                    os.unlink(input_path)
                gc.collect()

# Footer
st.markdown(f"""
<div style='text-align: center; color: #666; padding: 2rem 0;'>
    <p class="version">sdrf2graph v{sdrf.VERSION}</p>
</div>
""", unsafe_allow_html=True)
