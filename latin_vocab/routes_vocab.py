import logging

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, session, url_for

from .categories import CHAPTERS, FIRST_CHAPTER, SearchMode, chapter_label, parse_chapter
from .errors import QueryError
from .init import EXTENSION_KEY
from .lookup import LookupResult

logger = logging.getLogger(__name__)

bp_vocab = Blueprint("vocab", __name__)

# Each screen remembers its own chapter.
CHAPTER_VIEW_KEY = "chapter_view_chapter"
CUMULATIVE_VIEW_KEY = "cumulative_view_chapter"


def _lookup():
    return current_app.extensions[EXTENSION_KEY]


def _remembered_chapter(session_key):
    """
    URL arg overrides the session and is written through; an invalid or
    missing value falls back to what was stored, then to chapter 1.
    """
    stored = parse_chapter(session.get(session_key), default=FIRST_CHAPTER)
    chapter = parse_chapter(request.args.get("chapter"), default=stored)
    session[session_key] = chapter
    return chapter


def _search_mode():
    try:
        return SearchMode(request.args.get("mode", SearchMode.BY_WORD.value))
    except ValueError:
        return SearchMode.BY_WORD


def _run(fetch):
    """Run a lookup; a store-side failure degrades to an empty result."""
    try:
        return fetch(), None
    except QueryError as exc:
        logger.exception("Vocabulary lookup failed")
        return LookupResult(), str(exc)


def _respond(template, **context):
    result = context["result"]
    if request.args.get("format") == "json":
        payload = result.to_dict()
        payload.update({k: v for k, v in context.items() if k != "result"})
        if isinstance(payload.get("search_mode"), SearchMode):
            payload["search_mode"] = payload["search_mode"].value
        return jsonify(payload)
    return render_template(
        template,
        chapters=[(n, chapter_label(n)) for n in CHAPTERS],
        search_modes=list(SearchMode),
        **context,
    )


@bp_vocab.route("/chapter", methods=["GET"])
def chapter_view():
    if request.args.get("reset") == "1":
        session.pop(CHAPTER_VIEW_KEY, None)
        return redirect(url_for("vocab.chapter_view"))

    chapter = _remembered_chapter(CHAPTER_VIEW_KEY)
    result, error = _run(lambda: _lookup().entries_for_chapter(chapter))

    return _respond(
        "vocabulary.html",
        title=chapter_label(chapter),
        chapter=chapter,
        is_cumulative=False,
        search_query="",
        search_mode=SearchMode.BY_WORD,
        result=result,
        error=error,
    )


@bp_vocab.route("/", methods=["GET"])
@bp_vocab.route("/cumulative", methods=["GET"])
def cumulative_view():
    if request.args.get("reset") == "1":
        session.pop(CUMULATIVE_VIEW_KEY, None)
        return redirect(url_for("vocab.cumulative_view"))

    chapter = _remembered_chapter(CUMULATIVE_VIEW_KEY)
    search_query = request.args.get("q", "").strip()
    search_mode = _search_mode()

    # Blank search box means no filter, not "match everything by prefix".
    if search_query:
        result, error = _run(lambda: _lookup().search(chapter, search_query, search_mode))
    else:
        result, error = _run(lambda: _lookup().entries_up_to_chapter(chapter))

    return _respond(
        "vocabulary.html",
        title="Vocabulary",
        chapter=chapter,
        is_cumulative=True,
        search_query=search_query,
        search_mode=search_mode,
        result=result,
        error=error,
    )


@bp_vocab.route("/chapters", methods=["GET"])
def chapters():
    return jsonify([{"number": n, "label": chapter_label(n)} for n in CHAPTERS])
