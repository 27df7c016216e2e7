"""Källkollen - Streamlit webapp training System 2 thinking against misinformation."""

import sys
from pathlib import Path

# Ensure the package is on path and load .env before any code reads env vars
sys.path.insert(0, str(Path(__file__).resolve().parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent / ".env")

import logging

import streamlit as st

from kallkollen import challenge_content as text
from kallkollen.config import Settings
from kallkollen.content_provider import ContentProvider
from kallkollen.models import Screen, Stage, stage_fraction
from kallkollen.name_store import NameStore
from kallkollen.results import can_export, export_certificate, load_results
from kallkollen.session import QuizSession

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(name)s: %(message)s")


@st.cache_resource
def get_content_provider() -> ContentProvider:
    """Cached provider - one Gemini client shared across sessions."""
    return ContentProvider(settings.gemini_api_key, settings.gemini_model)


@st.cache_resource
def get_name_store() -> NameStore:
    return NameStore(settings.state_file)


def _new_session() -> QuizSession:
    return QuizSession(
        get_content_provider(),
        impulse_delay=settings.impulse_delay,
        strict=settings.strict,
    )


# Page config - must be first Streamlit command
st.set_page_config(
    page_title="Källkollen",
    page_icon="🧠",
    layout="centered",
)

st.markdown("""
<style>
    .kk-badge {
        display: inline-block;
        padding: 0.2rem 0.75rem;
        border-radius: 999px;
        background: #e0e7ff;
        color: #3730a3;
        font-size: 0.7rem;
        font-weight: 600;
        text-transform: uppercase;
        letter-spacing: 0.08em;
    }
    .kk-quote {
        background: #f8fafc;
        border: 2px solid #e0e7ff;
        border-radius: 1rem;
        padding: 1.25rem 1.5rem;
        margin: 1rem 0 1.5rem;
        font-size: 1.1rem;
        white-space: pre-wrap;
    }
    .kk-quote-source { display: block; margin-top: 0.75rem; font-size: 0.75rem; color: #94a3b8; }
    .kk-alert {
        background: linear-gradient(135deg, #ef4444, #991b1b);
        color: #fff;
        border-radius: 1rem;
        padding: 1.5rem;
        text-align: center;
        font-weight: 900;
        font-style: italic;
        font-size: 1.3rem;
        margin: 1rem 0 1.5rem;
    }
    .kk-waiting { text-align: center; color: #f97316; font-weight: 700; }
</style>
""", unsafe_allow_html=True)

# Session state
if "quiz" not in st.session_state:
    st.session_state.quiz = _new_session()
if "certificate_html" not in st.session_state:
    st.session_state.certificate_html = None

quiz: QuizSession = st.session_state.quiz


def _quote_html(body: str, source: str = "") -> str:
    def escape(s: str) -> str:
        return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    source_html = f'<span class="kk-quote-source">— {escape(source)}</span>' if source else ""
    return f'<div class="kk-quote">"{escape(body)}"{source_html}</div>'


def _render_header():
    col_title, col_score = st.columns([3, 1])
    with col_title:
        st.markdown("### 🧠 Källkollen")
        st.caption("Digital Samtid Edition")
    with col_score:
        st.metric("Poäng", quiz.progress.score)
    st.progress(stage_fraction(quiz.stage))


def _render_feedback():
    feedback = quiz.feedback
    if feedback.correct:
        st.success(f"✓ {text.FEEDBACK['correct_title']}")
    else:
        st.error(f"× {text.FEEDBACK['wrong_title']}")
    st.info(feedback.message)
    label = text.FEEDBACK["last_label"] if quiz.feedback_is_last else text.FEEDBACK["next_label"]
    if st.button(label, key=f"ack_{quiz.stage.value}", type="primary", use_container_width=True):
        quiz.acknowledge()
        st.rerun()


@st.fragment(run_every=1.0)
def _impulse_watch():
    """Poll the stress-test delay; rerun the whole page once the considered answer unlocks."""
    if quiz.stage is not Stage.SYSTEM1V2 or quiz.gate_open:
        st.rerun()
    st.markdown(
        f'<div class="kk-waiting">{text.STRESS_TEST["waiting"]} ({quiz.gate_remaining():.0f}s)</div>',
        unsafe_allow_html=True,
    )


def _render_actions(screen: Screen):
    for action in screen.actions:
        if not quiz.is_available(action):
            continue
        if st.button(action.label, key=f"{screen.stage.value}_{action.key}", use_container_width=True):
            quiz.choose(action)
            st.rerun()


def _render_challenge(screen: Screen):
    st.markdown(f'<span class="kk-badge">{screen.badge}</span>', unsafe_allow_html=True)
    st.subheader(screen.title)

    if screen.stage is Stage.SYSTEM1V2:
        st.markdown(f'<div class="kk-alert">EXTRA: JUST NU<br>"{screen.quote}"</div>', unsafe_allow_html=True)
        st.caption(screen.prompt)
        if not quiz.gate_open:
            _impulse_watch()
    elif screen.stage is Stage.TRUTH_EFFECT:
        st.markdown(_quote_html(screen.quote), unsafe_allow_html=True)
        st.markdown(f"**{screen.prompt}**")
    else:
        st.markdown(screen.prompt)
        if screen.quote:
            st.markdown(_quote_html(screen.quote, screen.quote_source), unsafe_allow_html=True)

    if screen.clues_available:
        if not quiz.clues_visible:
            if st.button(text.LATERAL_READING["reveal_label"], key="reveal_clues", use_container_width=True):
                quiz.toggle_clues()
                st.rerun()
        else:
            st.warning(
                f'**Sökresultat för "{screen.quote_source}":**\n\n'
                + "\n".join(f"- {clue}" for clue in screen.clues)
            )

    _render_actions(screen)


def _render_results(screen: Screen):
    store = get_name_store()
    view = load_results(quiz.progress, store)

    st.header(screen.title)
    st.caption(screen.prompt)
    for row in view.rows:
        st.progress(row.fraction, text=f"{row.emoji} {row.label}: {row.score} / {row.max_score}")

    st.markdown("#### Slutsats:")
    st.info(f'"{view.conclusion}"')

    st.divider()
    name = st.text_input(
        "Skriv ditt namn för diplomet:",
        value=view.name,
        placeholder="Ditt för- och efternamn",
        key="participant_name",
    )
    if st.button("🖨️ Skapa diplom", disabled=not can_export(name), type="primary", use_container_width=True):
        st.session_state.certificate_html = export_certificate(quiz.progress, name, store)
    if st.session_state.certificate_html:
        st.download_button(
            "Ladda ner diplom (HTML)",
            data=st.session_state.certificate_html,
            file_name="kallkollen_diplom.html",
            mime="text/html",
            use_container_width=True,
            key="download_certificate",
        )
        st.caption("Öppna filen i en webbläsare och välj Skriv ut → Spara som PDF.")

    st.divider()
    if st.button("Spela igen", key="restart", use_container_width=True):
        with st.spinner("Kalibrerar kognitiva försvar..."):
            quiz.reset()
        st.session_state.certificate_html = None
        st.session_state.pop("participant_name", None)
        st.rerun()


# Loading: nothing is rendered until the content fetch has resolved
if quiz.is_loading:
    with st.spinner("Kalibrerar kognitiva försvar..."):
        quiz.load_content()
    st.rerun()

_render_header()
st.divider()

if quiz.feedback is not None:
    _render_feedback()
else:
    current = quiz.screen()
    if current.stage is Stage.WELCOME:
        st.header(current.title)
        st.markdown(current.prompt)
        col_fast, col_slow = st.columns(2)
        with col_fast:
            st.info("⚡️ **System 1**\n\nMagkänsla, snabba klick, bekräftelsejäv.")
        with col_slow:
            st.info("🐢 **System 2**\n\nAnalys, källkoll, ifrågasättande.")
        _render_actions(current)
    elif current.stage is Stage.RESULTS:
        _render_results(current)
    else:
        _render_challenge(current)

st.caption("Källkollen • Digital Samtid")
