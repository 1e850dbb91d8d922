from __future__ import annotations

from quart import (
    Blueprint,
    current_app,
    redirect,
    render_template,
    request,
    ResponseReturnValue,
    url_for,
)

from .state import TaskConsole

blueprint = Blueprint("console", __name__, template_folder="templates")


def _console() -> TaskConsole:
    return current_app.extensions["task_console"]


def _back() -> ResponseReturnValue:
    return redirect(url_for("console.index"))


@blueprint.get("/")
async def index() -> ResponseReturnValue:
    console = _console()
    if not console.mounted:
        await console.mount()
    return await render_template("console.html", console=console)


@blueprint.post("/refresh")
async def refresh() -> ResponseReturnValue:
    await _console().mount()
    return _back()


@blueprint.post("/tasks")
async def add() -> ResponseReturnValue:
    form = await request.form
    await _console().add(form.get("title", ""))
    return _back()


@blueprint.post("/tasks/<int:task_id>/toggle")
async def toggle(task_id: int) -> ResponseReturnValue:
    await _console().toggle(task_id)
    return _back()


@blueprint.post("/tasks/<int:task_id>/delete")
async def delete(task_id: int) -> ResponseReturnValue:
    await _console().delete(task_id)
    return _back()


@blueprint.post("/error/dismiss")
async def dismiss_error() -> ResponseReturnValue:
    _console().dismiss_error()
    return _back()
