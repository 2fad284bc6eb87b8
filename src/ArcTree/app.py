"""Streamlit UI for ArcTree."""

from __future__ import annotations

import re

import streamlit as st

from ArcTree import token_store
from ArcTree.archive_reader import ArchiveError, read_zip_entries
from ArcTree.errors import TreeBuildError
from ArcTree.file_filter import compile_patterns, parse_pattern_input, validate_patterns
from ArcTree.models import SourceType
from ArcTree.providers.azure_devops import AzureDevOpsError
from ArcTree.providers.github import GitHubError, RateLimitError
from ArcTree.service import BuildReport, build_report, list_repo_entries
from ArcTree.strategies import MissingDirectoryPolicy, StrategyType
from ArcTree.url_parser import URLParseError

_SOURCE_REPO = "Repository URL"
_SOURCE_ZIP = "ZIP archive"

_STRATEGY_LABELS = {
    StrategyType.DIRECTORY_FLAG: "Directory entries (strict)",
    StrategyType.SEPARATOR_SYNTHESIS: "Path separators (synthesize missing directories)",
}

_PREVIEW_MAX_LINES = 1000


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def _token_input(label: str, source: SourceType, query_key: str, help_text: str) -> str:
    saved = token_store.load_token(source) or ""
    value = st.text_input(label, value=_qp(query_key) or saved, type="password", help=help_text)
    return value


def _sync_keychain(remember: bool, tokens: dict[SourceType, str]) -> None:
    for source, value in tokens.items():
        if remember and value:
            token_store.save_token(source, value)
        else:
            token_store.delete_token(source)


def main() -> None:
    st.set_page_config(page_title="ArcTree", page_icon="🌳", layout="wide")

    header_left, header_right = st.columns([8, 1])
    with header_left:
        st.title("ArcTree")
    with header_right:
        st.markdown("<div style='height: 1.5rem'></div>", unsafe_allow_html=True)
        with st.popover("⚙", use_container_width=True):
            st.subheader("Settings")
            github_token = _token_input(
                "GitHub Token (optional)",
                SourceType.GITHUB,
                "token",
                "Required for private repos. Raises the rate limit from 60 to 5,000 requests/hour.",
            )
            azdo_pat = _token_input(
                "Azure DevOps PAT (optional)",
                SourceType.AZURE_DEVOPS,
                "pat",
                "Required for private Azure DevOps repositories.",
            )
            if token_store.is_available():
                remember = st.checkbox(
                    "Save tokens to OS keychain",
                    value=bool(token_store.load_token(SourceType.GITHUB)
                               or token_store.load_token(SourceType.AZURE_DEVOPS)),
                )
                _sync_keychain(
                    remember,
                    {SourceType.GITHUB: github_token, SourceType.AZURE_DEVOPS: azdo_pat},
                )

    st.caption(
        "Rebuild the directory tree of a ZIP archive or a GitHub / Azure DevOps branch "
        "from its flat list of paths."
    )

    source = st.radio("Source", [_SOURCE_REPO, _SOURCE_ZIP], horizontal=True)
    url = ""
    upload = None
    if source == _SOURCE_REPO:
        url = st.text_input(
            "Repository URL",
            value=_qp("url"),
            placeholder="https://github.com/owner/repo",
        )
    else:
        upload = st.file_uploader("ZIP archive", type=["zip", "jar", "apk", "docx", "xlsx"])

    strategy_options = list(_STRATEGY_LABELS)
    default_strategy = _qp("strategy", StrategyType.DIRECTORY_FLAG.value)
    strategy = st.selectbox(
        "Hierarchy from",
        strategy_options,
        index=next(
            (i for i, s in enumerate(strategy_options) if s.value == default_strategy), 0
        ),
        format_func=_STRATEGY_LABELS.get,
    )
    strict = st.checkbox(
        "Fail on missing directory entries",
        value=False,
        disabled=strategy is not StrategyType.DIRECTORY_FLAG,
        help="Report paths whose parent directory has no entry of its own instead of "
        "keeping the separator inside the name.",
    )

    filter_raw = st.text_input(
        "File filter (regex, comma-separated)",
        value=_qp("filter"),
        placeholder=r"\.py$, ^docs/",
        help="Only files whose path matches at least one pattern are shown. "
        "Directory entries are always kept.",
    )
    filter_patterns = parse_pattern_input(filter_raw)
    filter_errors = validate_patterns(filter_patterns) if filter_patterns else []
    for err in filter_errors:
        st.error(f"Invalid regex: {err}")

    build_clicked = st.button(
        "Build tree",
        type="primary",
        use_container_width=True,
        disabled=bool(filter_errors),
    )

    if build_clicked:
        policy = MissingDirectoryPolicy.RAISE if strict else MissingDirectoryPolicy.TOLERATE
        _run_build(
            source,
            url,
            upload,
            github_token,
            azdo_pat,
            strategy,
            policy,
            compile_patterns(filter_patterns),
        )
    elif "report" in st.session_state:
        _show_report(st.session_state["report"])


def _run_build(
    source: str,
    url: str,
    upload,
    github_token: str,
    azdo_pat: str,
    strategy: StrategyType,
    policy: MissingDirectoryPolicy,
    patterns: list[re.Pattern[str]],
) -> None:
    try:
        with st.spinner("Listing entries..."):
            if source == _SOURCE_REPO:
                if not url:
                    st.error("Please enter a repository URL.")
                    return
                repo_info, entries = list_repo_entries(url, github_token, azdo_pat)
                title = f"{repo_info.owner}/{repo_info.repo}"
            else:
                if upload is None:
                    st.error("Please upload a ZIP archive.")
                    return
                entries = read_zip_entries(upload)
                title = upload.name

        if not entries:
            st.warning("No entries found.")
            return

        report = build_report(title, entries, strategy, policy, patterns)
    except URLParseError as exc:
        st.error(f"Invalid URL: {exc}")
        return
    except RateLimitError as exc:
        st.error(str(exc))
        st.info("Tip: add a GitHub token in Settings to raise your rate limit.")
        return
    except (GitHubError, AzureDevOpsError, ArchiveError) as exc:
        st.error(str(exc))
        return
    except TreeBuildError as exc:
        st.error(f"Cannot rebuild the tree: {exc}")
        return

    st.session_state["report"] = report
    _show_report(report)


def _show_report(report: BuildReport) -> None:
    stats = report.stats
    cols = st.columns(5)
    cols[0].metric("Entries", stats.entries)
    cols[1].metric("Directories", stats.directories)
    cols[2].metric("Synthesized", stats.synthesized)
    cols[3].metric("Root nodes", stats.roots)
    cols[4].metric("Depth", stats.max_depth)

    st.download_button(
        label="Download Markdown",
        data=report.markdown,
        file_name=f"{report.title.replace('/', '_')}_tree.md",
        mime="text/markdown",
        use_container_width=True,
    )

    preview_lines = report.markdown.split("\n")
    with st.expander("Preview", expanded=True):
        if len(preview_lines) > _PREVIEW_MAX_LINES:
            st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language="markdown")
            st.caption(
                f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
                f"(total {len(preview_lines):,} lines). "
                "Download the file for the full tree."
            )
        else:
            st.code(report.markdown, language="markdown")


if __name__ == "__main__":
    main()
