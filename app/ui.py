import html
import logging
import gradio as gr
from app.constants.practice import PRACTICE_PHRASES
from app.scoring.exceptions import ScoringError
from app.scoring.models import GradeReport
from app.scoring.scorer import grade

logger = logging.getLogger(__name__)

css = """
.word-scores { display: flex; flex-wrap: wrap; justify-content: center; gap: 15px; }
.word-container { text-align: center; padding: 10px; border: 1px solid #ddd; border-radius: 8px; }
.word { font-size: 1.5em; font-weight: bold; margin-bottom: 5px; }
.score { padding: 8px 12px; border-radius: 5px; color: white; font-weight: bold; }
.good { background-color: #28a745; } /* Green */
.medium { background-color: #ffc107; } /* Yellow */
.bad { background-color: #dc3545; } /* Red */
"""


def get_similarity_class(similarity):
    if similarity >= 0.5:
        return "medium"
    return "bad"


def error_html(message):
    return f"<p style='text-align:center; color:red;'>{html.escape(message)}</p>"


def generate_summary_html(report: GradeReport):
    return (
        "<div class='summary' style='text-align:center;'>"
        f"<div class='score' style='background-color:{report.grade.color}; display:inline-block;'>"
        f"{report.score} / 100 &middot; {report.grade.grade} ({report.grade.level})"
        "</div>"
        f"<p>{html.escape(report.feedback)}</p>"
        "</div>"
    )


def generate_details_html(report: GradeReport):
    if not report.phonetic_details:
        return (
            "<div class='word-scores'><div class='word-container'>"
            "<div class='score good'>All words matched</div>"
            "</div></div>"
        )

    html_output = "<h3 class='scores-title'>Words to practice</h3><div class='word-scores'>"
    for detail in report.phonetic_details:
        html_output += (
            "<div class='word-container'>"
            f"<div class='word'>{html.escape(detail.word)}</div>"
            f"<div>heard: {html.escape(detail.transcribed) or '&mdash;'}</div>"
            f"<div class='score {get_similarity_class(detail.similarity)}'>"
            f"{round(detail.similarity * 100)}%</div>"
            "</div>"
        )
    html_output += "</div>"
    return html_output


def grade_texts(reference_text, transcribed_text):
    if not reference_text or not reference_text.strip():
        return error_html("Please enter a reference text."), ""

    try:
        report = grade(reference_text, transcribed_text or "")
    except ScoringError as e:
        return error_html(str(e)), ""

    return generate_summary_html(report), generate_details_html(report)


def create_gradio_app() -> gr.Blocks:
    with gr.Blocks() as demo:
        gr.HTML(f"<style>{css}</style>")
        gr.Markdown(
            """
            # Pronunciation Grader
            Enter the reference text and what was actually said (for example, a speech-to-text transcript).
            The grader scores how closely the transcript matches and lists the words that need more practice.

            Grades: A+ (95+), A (90+), B+ (85+), B (70+), C (50+), F (below 50)
            """
        )

        with gr.Row():
            reference_input = gr.Textbox(label="Reference text")
            transcript_input = gr.Textbox(label="Transcribed text")

        gr.Examples(
            examples=[[p["text"], ""] for p in PRACTICE_PHRASES[:3]],
            inputs=[reference_input, transcript_input],
        )

        btn = gr.Button("Grade", variant="primary")

        gr.Markdown("---")
        gr.Markdown("## Results")

        summary_html = gr.HTML()
        details_html = gr.HTML()

        btn.click(
            fn=grade_texts,
            inputs=[reference_input, transcript_input],
            outputs=[summary_html, details_html],
        )

    logger.info("Gradio grading UI created.")
    return demo
