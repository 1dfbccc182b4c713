from __future__ import annotations
import streamlit as st
import re
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import io

from text_summary.config import KNOWN_PROVIDERS, get_settings
from text_summary.logging_config import setup_logging
from text_summary.preprocessing import normalize_whitespace, split_sentences, tokenize, word_count, is_content_token
from text_summary.features import word_frequencies
from text_summary.scoring import score_sentences
from text_summary.summarize import pick_sentence_count, select_sentences, summarize
from text_summary.remote import summarize_with_fallback

def count_label(text: str) -> str:
    """Word/char counter shown under the input box."""
    text = text or ""
    chars = len(text)
    words = word_count(text)
    return f"{words} word{'' if words == 1 else 's'} • {chars} char{'' if chars == 1 else 's'}"

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    content = uploaded_file.read().decode("utf-8-sig")
    if uploaded_file.name.lower().endswith(".md"):
        return extract_markdown_text(content)
    return content

def draw_score_chart(scored, selected_idx):
    """Bar chart of sentence scores, selected sentences highlighted."""
    fig, ax = plt.subplots(figsize=(10, 4))
    labels = [f"S{s.idx+1}" for s in scored]
    colors = ['orange' if s.idx in selected_idx else 'lightblue' for s in scored]
    ax.bar(labels, [s.score for s in scored], color=colors)
    ax.set_title("Sentence Scores (selected in orange)", fontsize=12, fontweight='bold')
    ax.set_ylabel("Score")
    if len(scored) > 20:
        ax.tick_params(axis='x', labelrotation=90, labelsize=7)
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    """Create sidebar controls for provider and modes."""
    settings = get_settings()
    st.sidebar.header("Provider")
    providers = list(KNOWN_PROVIDERS)
    default = providers.index(settings.provider) if settings.provider in providers else 0
    provider = st.sidebar.selectbox("LLM provider", providers, index=default,
                                    help="Remote provider tried before the local summarizer")

    st.sidebar.header("Options")
    local_only = st.sidebar.checkbox("Local summary only", value=False, help="Skip the remote call")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show local pipeline steps")
    return provider, local_only, debug_mode

def debug_pipeline(text: str):
    """Run the local pipeline with detailed debugging information."""

    # Step 1: Segmentation
    st.header("Step 1: Normalization & Segmentation")
    with st.expander("Segmentation Details", expanded=True):
        cleaned = normalize_whitespace(text)
        sentences = split_sentences(cleaned)
        total_words = word_count(cleaned)

        st.success(f"Found {len(sentences)} sentences")
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Sentences", len(sentences))
        with col2:
            st.metric("Total Words", total_words)
        with col3:
            content = sum(1 for t in tokenize(cleaned) if is_content_token(t))
            st.metric("Content Words", content)

        sentences_df = pd.DataFrame([
            {
                "Sentence #": s.idx + 1,
                "Text": s.text[:80] + "..." if len(s.text) > 80 else s.text,
                "Tokens": word_count(s.text),
            }
            for s in sentences
        ])
        st.dataframe(sentences_df, use_container_width=True)

    if len(sentences) <= 1:
        st.info("Zero or one sentence: the summary is the text itself.")
        return summarize(cleaned)

    # Step 2: Frequency table
    st.header("Step 2: Frequency Table")
    with st.expander("Frequency Details", expanded=True):
        freq = word_frequencies(sentences)
        st.metric("Unique Terms", len(freq))
        freq_df = pd.DataFrame(
            [{"Term": t, "Count": c, "ln(1+f)": f"{np.log1p(c):.4f}"}
             for t, c in sorted(freq.items(), key=lambda x: (-x[1], x[0]))]
        )
        st.dataframe(freq_df, use_container_width=True, height=250)

    # Step 3: Scoring
    st.header("Step 3: Sentence Scoring")
    with st.expander("Scoring Details", expanded=True):
        scored = score_sentences(sentences, freq)
        values = np.array([s.score for s in scored])
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Min Score", f"{values.min():.3f}")
        with col2:
            st.metric("Max Score", f"{values.max():.3f}")
        with col3:
            st.metric("Mean Score", f"{values.mean():.3f}")
        with col4:
            st.metric("Std Score", f"{values.std():.3f}")

    # Step 4: Selection
    st.header("Step 4: Selection")
    with st.expander("Selection Details", expanded=True):
        k = pick_sentence_count(len(sentences), total_words)
        selected = select_sentences(scored, k)
        selected_idx = {s.idx for s in selected}

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Target Sentences", k)
        with col2:
            st.metric("Actual Ratio", f"{k / len(sentences):.2%}")

        if len(scored) <= 60:
            st.image(draw_score_chart(scored, selected_idx), caption="Sentence scores")

        selection_df = pd.DataFrame([
            {
                "Sentence #": s.idx + 1,
                "Score": f"{s.score:.3f}",
                "Selected": "yes" if s.idx in selected_idx else "no",
                "Text": s.text,
            }
            for s in scored
        ])
        st.dataframe(selection_df, use_container_width=True)

    return " ".join(s.text for s in selected)

def main():
    settings = get_settings()
    setup_logging(settings.log_level)

    st.title("Text Summarizer")
    st.write("Paste text or upload a file. An LLM summary is requested first; "
             "a local extractive summary is used when that fails.")

    provider, local_only, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader("Choose a text file", type=['txt', 'md'])
    initial = load_text_from_file(uploaded_file) if uploaded_file is not None else ""
    text = st.text_area("Text", initial, height=250)
    st.caption(count_label(text))

    if st.button("Summarize", type="primary", disabled=not normalize_whitespace(text)):
        if debug_mode:
            st.markdown("---")
            st.title("Local Pipeline Debug Mode")
            result = debug_pipeline(text)
            status = "Local summary (debug mode)."
        elif local_only:
            result = summarize(text)
            status = "Local summary."
        else:
            with st.spinner(f"Summarizing with {provider}…"):
                outcome = summarize_with_fallback(text, provider=provider, settings=settings)
            result = outcome.summary
            if outcome.source == "local":
                status = "LLM request failed. Showing local fallback summary."
                st.caption(outcome.error or "")
            else:
                status = "Done." if result else "Could not generate a summary."

        st.markdown("---")
        st.header("Summary")
        st.info(status)
        st.text_area("Generated Summary", result or "Your summary will appear here.", height=150, disabled=True)

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Original Length", word_count(text))
        with col2:
            st.metric("Summary Length", word_count(result or ""))

if __name__ == "__main__":
    main()
