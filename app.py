"""
Streamlit Exam Score Report

Upload a scores spreadsheet to see the top students per component and the
branch-wise averages, then download the report as an Excel file.
"""

import streamlit as st
import json
import io
import logging

from examscores import (
    ScoreDimension,
    averages_frame,
    build_report,
    format_report,
    generate_workbook,
    get_default_config,
    merge_config,
    process_rows,
    rankings_frame,
    read_rows,
    validate_config,
    validate_records,
    SpreadsheetError,
)


# Page configuration
st.set_page_config(
    page_title="Exam Score Report",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="collapsed"
)


class _ListHandler(logging.Handler):
    """Collect warnings from the pipeline so they can be shown on the page."""

    def __init__(self):
        super().__init__(level=logging.WARNING)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord):
        self.messages.append(record.getMessage())


def init_session_state():
    """Initialize session state with default values."""
    if "config" not in st.session_state:
        st.session_state.config = get_default_config()

    if "report" not in st.session_state:
        st.session_state.report = None

    if "batch" not in st.session_state:
        st.session_state.batch = None

    if "log_messages" not in st.session_state:
        st.session_state.log_messages = []


def render_sidebar():
    """Render a minimal sidebar for config upload and download."""
    st.sidebar.header("Configuration")

    uploaded_config = st.sidebar.file_uploader(
        "Upload config JSON",
        type=["json"],
        key="sidebar_config_uploader",
        help="Override branch table, tolerance or top N"
    )

    if uploaded_config is not None:
        try:
            user_config = json.load(uploaded_config)
            st.session_state.config = merge_config(user_config)
            st.sidebar.success("✓ Config loaded!")
        except json.JSONDecodeError:
            st.sidebar.error("Invalid JSON file")

    st.sidebar.download_button(
        "📥 Download Config",
        data=json.dumps(st.session_state.config, indent=2),
        file_name="score_report_config.json",
        mime="application/json"
    )

    for issue in validate_config(st.session_state.config):
        if issue["type"] == "warning":
            st.sidebar.warning(f"⚠️ {issue['message']}")
        else:
            st.sidebar.error(f"❌ {issue['message']}")


def render_upload():
    """Render the spreadsheet upload and run the pipeline."""
    st.header("Step 1: Upload Scores")

    uploaded = st.file_uploader(
        "Upload scores spreadsheet (XLSX or CSV)",
        type=["xlsx", "csv"],
        key="scores_file"
    )

    if uploaded is None:
        st.info("Upload a spreadsheet to build the report")
        return

    config = st.session_state.config
    if any(i["type"] == "error" for i in validate_config(config)):
        st.error("Fix the configuration errors in the sidebar first")
        return

    try:
        rows = read_rows(io.BytesIO(uploaded.getvalue()), name=uploaded.name)
    except SpreadsheetError as e:
        st.error(f"Error reading spreadsheet: {e}")
        return

    handler = _ListHandler()
    pipeline_logger = logging.getLogger("examscores")
    pipeline_logger.addHandler(handler)
    try:
        batch = process_rows(rows, config)
    finally:
        pipeline_logger.removeHandler(handler)

    st.session_state.batch = batch
    st.session_state.report = build_report(batch, top_n=config["top_n"])
    st.session_state.log_messages = handler.messages

    st.success(f"✓ {len(batch.records)} students loaded, {len(batch.rejected)} rows skipped")


def render_report():
    """Render the rankings and averages."""
    data = st.session_state.report
    if data is None:
        return

    st.header("Step 2: Report")

    for issue in validate_records(st.session_state.batch.records):
        st.warning(f"⚠️ {issue['message']}")

    tab1, tab2, tab3 = st.tabs(["🏆 Top Students", "📈 Averages", "⚠️ Diagnostics"])

    with tab1:
        cols = st.columns(3)
        for i, dim in enumerate(ScoreDimension):
            with cols[i % 3]:
                st.subheader(dim.title)
                st.dataframe(rankings_frame(data, dim), hide_index=True, use_container_width=True)

    with tab2:
        df = averages_frame(data)
        st.dataframe(df, hide_index=True, use_container_width=True)
        branch_df = df[df["Branch"] != "All"].set_index("Branch")
        if not branch_df.empty:
            st.bar_chart(branch_df["Average"])

    with tab3:
        if st.session_state.log_messages:
            for message in st.session_state.log_messages:
                st.text(message)
        else:
            st.success("✓ No skipped or flagged rows")

    st.divider()

    buffer = io.BytesIO()
    generate_workbook(data).save(buffer)
    buffer.seek(0)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "📥 Download Excel Report",
            data=buffer,
            file_name=st.session_state.config.get("output_file", "score_report.xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            type="primary",
            use_container_width=True
        )
    with col2:
        st.download_button(
            "📄 Download Text Report",
            data=format_report(data),
            file_name="score_report.txt",
            mime="text/plain",
            use_container_width=True
        )


def main():
    """Main application entry point."""
    init_session_state()

    st.title("📊 Exam Score Report")

    render_sidebar()

    render_upload()

    st.divider()

    render_report()


if __name__ == "__main__":
    main()
