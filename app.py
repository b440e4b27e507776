from __future__ import annotations

import sys
import time
from typing import Any, Dict

import streamlit as st
from loguru import logger

from config import logging_config
from evaluation_engine import AnswerEvaluator, EvaluationResult
from interview_engine import PracticeSession
from llm_client import ollama_client
from question_bank import CATEGORIES, Answer, get_questions
from report_generator import summarize_progress


logger.remove()
logger.add(sys.stderr, level=logging_config.level)


def _get_session() -> Dict[str, Any]:
    if "state" not in st.session_state:
        st.session_state.state = {}
    return st.session_state.state


def _start_practice(category: str) -> None:
    state = _get_session()
    questions = get_questions(None if category == "all" else category)
    if not questions:
        st.error("No questions available for this category.")
        return
    session = PracticeSession(questions)
    state["practice_session"] = session
    state["current_question"] = session.get_next_question()
    state["question_started_at"] = time.time()
    state["last_result"] = None
    state["practice_completed"] = False


def _render_sidebar(evaluator: AnswerEvaluator) -> None:
    st.sidebar.header("Evaluation")
    connected = ollama_client.check_connection()
    if connected:
        st.sidebar.success(f"Ollama connected ({ollama_client.base_url})")
        models = ollama_client.list_models()
        if models:
            current = ollama_client.model
            index = models.index(current) if current in models else 0
            selected = st.sidebar.selectbox("Model", models, index=index)
            if selected != current:
                ollama_client.set_model(selected)
    else:
        st.sidebar.warning("Ollama is not available. Answers are scored with local heuristics.")
    evaluator.use_ollama = st.sidebar.checkbox(
        "Use AI evaluation when available",
        value=evaluator.use_ollama,
    )


def _render_result(result: EvaluationResult) -> None:
    label = "AI evaluation" if result.source == "ollama" else "Heuristic evaluation"
    st.metric(label, f"{result.score} / 100")
    if result.detailed_feedback:
        st.write(result.detailed_feedback)

    st.markdown("**Strengths**")
    for s in result.strengths:
        st.write(f"- {s}")
    st.markdown("**Improvements**")
    for i in result.improvements:
        st.write(f"- {i}")
    if result.suggestions:
        st.markdown("**Suggestions**")
        for s in result.suggestions:
            st.write(f"- {s}")
    if result.criteria_scores:
        st.markdown("**Criteria**")
        for criterion, score in result.criteria_scores.items():
            st.write(f"{criterion}: {score}")


def _run_main_page() -> None:
    st.title("Interview Practice")

    state = _get_session()
    if "evaluator" not in state:
        state["evaluator"] = AnswerEvaluator()
    evaluator: AnswerEvaluator = state["evaluator"]
    _render_sidebar(evaluator)

    st.subheader("1. Choose a category")
    category = st.selectbox("Category", ["all", *CATEGORIES])
    if st.button("Start practice"):
        _start_practice(category)

    if "practice_session" not in state:
        return

    session: PracticeSession = state["practice_session"]
    current_question = state.get("current_question")

    st.subheader("2. Answer")
    if current_question is not None and not state.get("practice_completed", False):
        st.markdown(f"**{current_question.title}** ({current_question.category}, {current_question.difficulty})")
        if current_question.description:
            st.caption(current_question.description)
        st.caption(f"Suggested time: {current_question.time_limit} minutes")

        answer_text = st.text_area("Your answer", key=f"answer_{current_question.id}", height=240)
        if st.button("Submit answer"):
            elapsed = time.time() - float(state.get("question_started_at") or time.time())
            answer = Answer(text=answer_text, time_spent=elapsed)
            with st.spinner("Evaluating..."):
                result = evaluator.evaluate_answer(current_question, answer)
            session.record_evaluation(current_question, answer, result)
            state["last_result"] = result
            if session.has_more_questions():
                state["current_question"] = session.get_next_question()
                state["question_started_at"] = time.time()
            else:
                state["current_question"] = None
                state["practice_completed"] = True
            st.rerun()

    last_result = state.get("last_result")
    if last_result is not None:
        st.subheader("Feedback on your last answer")
        _render_result(last_result)

    # --- Results ---
    if state.get("practice_completed", False):
        st.subheader("3. Results")
        report = summarize_progress(session.entries)
        st.write(f"Answered: **{report['total_answered']}** | Average score: **{report['average_score']}**")
        for category_name, score in report["category_scores"].items():
            st.write(f"{category_name}: {score}")

        st.markdown("**Strengths**")
        for s in report["strengths"]:
            st.write(f"- {s}")
        st.markdown("**Improvements**")
        for i in report["improvements"]:
            st.write(f"- {i}")
        st.markdown("**Tips**")
        for t in report["tips"]:
            st.write(f"- {t}")


def main() -> None:
    _run_main_page()


if __name__ == "__main__":
    main()
