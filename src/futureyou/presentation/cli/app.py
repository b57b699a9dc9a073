"""Console-driven UI loop for Future You vs Present You."""
from __future__ import annotations

from typing import Dict, List, Literal, Tuple

from futureyou.core.types import Move
from futureyou.data.errors import DataSaveError
from futureyou.data.state_store import StateStore
from futureyou.presentation.cli import config, render
from futureyou.services import GameService, GameView, HourLockedError, InvalidTaskError
from futureyou.services.controllers import SessionController

MenuAction = Literal["focus", "waste", "edit_task", "refresh", "options", "reset", "quit"]
MenuEntry = Tuple[str, MenuAction]


def main() -> None:
    """Start the interactive CLI session."""
    service = _build_game_service()
    controller = SessionController(service, service.load_state())
    options = config.load_config()
    print("=== Future You vs Present You ===")
    running = True
    while running:
        view = controller.view()
        render.render_status(view, debug=render.debug_enabled())
        entries = _build_menu_entries(view)
        title = "Locked" if view.is_locked else "What will you do this hour?"
        render.render_menu(title, [label for label, _ in entries])
        _, action = entries[_prompt_choice(len(entries))]
        running = _dispatch(controller, action, options)
    print("The shadow of the future guides your hand.")


def _build_game_service() -> GameService:
    """Construct the GameService with the default on-disk store."""
    return GameService(store=StateStore())


def _build_menu_entries(view: GameView) -> List[MenuEntry]:
    entries: List[MenuEntry] = []
    if not view.is_locked:
        entries.append(("FOCUS (Cooperate) 🤝", "focus"))
        entries.append(("WASTE (Defect) 💀", "waste"))
    entries.append(("Edit Beast Task", "edit_task"))
    entries.append(("Refresh", "refresh"))
    entries.append(("Options", "options"))
    if render.debug_enabled():
        entries.append(("Reset Progress (Debug)", "reset"))
    entries.append(("Quit", "quit"))
    return entries


def _dispatch(controller: SessionController, action: MenuAction, options: Dict[str, bool]) -> bool:
    """Run a menu action; return False when the session should end."""
    if action == "quit":
        return False
    if action == "focus":
        _play_move(controller, Move.FOCUS, confirm=options.get("confirm_moves", True))
    elif action == "waste":
        _play_move(controller, Move.WASTE, confirm=options.get("confirm_moves", True))
    elif action == "edit_task":
        _edit_task(controller)
    elif action == "options":
        _options_menu(options)
    elif action == "reset":
        try:
            controller.reset()
        except DataSaveError as exc:
            print(f"Could not reset progress: {exc}")
            return True
        print("Progress reset.")
    return True


def _play_move(controller: SessionController, move: Move, *, confirm: bool) -> None:
    controller.select_move(move)
    if confirm and not _prompt_yes_no(f"Confirm {move.value} for this hour? [y/N]: "):
        controller.clear_selection()
        print("Nothing played.")
        return
    try:
        outcome = controller.confirm()
    except (HourLockedError, DataSaveError) as exc:
        controller.clear_selection()
        print(exc)
        return
    render.render_outcome(outcome)
    input("Press Enter to continue...")
    controller.acknowledge_outcome()


def _edit_task(controller: SessionController) -> None:
    current = controller.state.beast_task
    raw = input(f"New beast task (blank keeps '{current}'): ")
    if not raw.strip():
        print("Beast task unchanged.")
        return
    try:
        controller.edit_task(raw)
    except (InvalidTaskError, DataSaveError) as exc:
        print(exc)
        return
    print(f"Beast task set: [ {controller.state.beast_task} ]")


def _options_menu(options: Dict[str, bool]) -> None:
    """Toggle user options and persist them."""
    while True:
        state_label = "On" if options.get("confirm_moves", True) else "Off"
        render.render_menu("Options", [f"Confirm moves: {state_label}", "Back"])
        if _prompt_choice(2) == 1:
            return
        options["confirm_moves"] = not options.get("confirm_moves", True)
        try:
            config.save_config(options)
        except OSError as exc:
            print(f"Could not save options: {exc}")


def _prompt_yes_no(prompt: str) -> bool:
    return input(prompt).strip().lower() in ("y", "yes")


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")
