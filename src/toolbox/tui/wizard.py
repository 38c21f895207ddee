"""Generator wizard state machine.

Collects a tool type, a name and a description, then asks the controller to
scaffold the tool:

    TOOL_TYPE_SELECT -> NAME_INPUT -> DESCRIPTION_INPUT -> COMPLETION | ERROR

``update`` is pure. Scaffolding happens in the controller, which reports the
outcome back through ``resolve_generation``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from rich.markup import escape

from toolbox.generator.errors import GeneratorError, ValidationError
from toolbox.generator.types import ScaffoldResult, ToolSpec, ToolType
from toolbox.generator.validation import validate_tool_name
from toolbox.tui import styles
from toolbox.tui.effects import Effect, Generate, Pop, Quit
from toolbox.tui.keys import Action, KeyPress, menu_action, printable, text_action


class WizardStep(Enum):
    """Steps of the generator wizard."""

    TOOL_TYPE_SELECT = "tool_type_select"
    NAME_INPUT = "name_input"
    DESCRIPTION_INPUT = "description_input"
    COMPLETION = "completion"
    ERROR = "error"

    @property
    def is_text_entry(self) -> bool:
        """Whether keys are read as literal text in this step."""
        return self in (WizardStep.NAME_INPUT, WizardStep.DESCRIPTION_INPUT)


TOOL_TYPES: tuple[ToolType, ...] = (ToolType.CLI, ToolType.TUI, ToolType.WEB)
BACK_CHOICE = "Back to Main Menu"
CHOICES: tuple[str, ...] = tuple(t.label for t in TOOL_TYPES) + (BACK_CHOICE,)

NAME_PROMPT = "Enter tool name (lowercase, no spaces):"
DESCRIPTION_PROMPT = "Enter tool description:"
NAME_EXAMPLES = "Examples: filehasher, networkping, jsonformatter"
DESCRIPTION_EXAMPLES = "Examples: A CLI tool for calculating file hashes"

SELECT_HELP = "Use ↑/↓ or j/k to navigate, Enter to select, Esc to go back"
INPUT_HELP = "Press Enter to continue, Esc to go back"
COMPLETION_HELP = "Press 'r' to create another tool, 'b' to go back, or 'q' to quit"
ERROR_HELP = "Press Enter to try again, 'r' to start over, 'b' to go back, or 'q' to quit"


@dataclass(frozen=True)
class ToolDraft:
    """Fields collected so far."""

    tool_type: ToolType | None = None
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class WizardState:
    """Complete wizard state; every transition returns a new instance.

    ``spec`` is set once the description is committed and kept through the
    ERROR step so generation can be re-attempted.
    """

    step: WizardStep = WizardStep.TOOL_TYPE_SELECT
    cursor: int = 0
    buffer: str = ""
    error: str = ""
    success: str = ""
    draft: ToolDraft = field(default_factory=ToolDraft)
    spec: ToolSpec | None = None
    created: tuple[Path, ...] = ()


def initial_state() -> WizardState:
    return WizardState()


def update(state: WizardState, key: KeyPress) -> tuple[WizardState, Effect | None]:
    """Apply one key press to the wizard.

    Returns:
        The new state and the effect the controller should run, if any.
    """
    if state.step.is_text_entry:
        return _update_text(state, key)
    return _update_menu(state, key)


def _update_menu(state: WizardState, key: KeyPress) -> tuple[WizardState, Effect | None]:
    action = menu_action(key)
    if action is None:
        return state, None
    if action is Action.QUIT:
        return state, Quit()
    if action is Action.BACK:
        return state, Pop()

    if state.step is WizardStep.TOOL_TYPE_SELECT:
        if action is Action.UP:
            return replace(state, cursor=max(0, state.cursor - 1)), None
        if action is Action.DOWN:
            return replace(state, cursor=min(len(CHOICES) - 1, state.cursor + 1)), None
        if action is Action.CONFIRM:
            if state.cursor >= len(TOOL_TYPES):
                return state, Pop()
            tool_type = TOOL_TYPES[state.cursor]
            return (
                replace(
                    state,
                    step=WizardStep.NAME_INPUT,
                    buffer="",
                    error="",
                    draft=ToolDraft(tool_type=tool_type),
                ),
                None,
            )
        return state, None

    if action is Action.RETRY:
        return initial_state(), None
    if action is Action.CONFIRM and state.step is WizardStep.ERROR and state.spec:
        return state, Generate(state.spec)
    return state, None


def _update_text(state: WizardState, key: KeyPress) -> tuple[WizardState, Effect | None]:
    action = text_action(key)
    if action is None:
        return state, None
    if action is Action.QUIT:
        return state, Quit()
    if action is Action.INSERT:
        return replace(state, buffer=state.buffer + printable(key.text)), None
    if action is Action.DELETE:
        return replace(state, buffer=state.buffer[:-1]), None
    if action is Action.BACK:
        return _cancel(state), None
    if action is Action.CONFIRM:
        return _commit(state)
    return state, None


def _cancel(state: WizardState) -> WizardState:
    """Step back one position, clearing the step being left."""
    if state.step is WizardStep.NAME_INPUT:
        tool_type = state.draft.tool_type
        cursor = TOOL_TYPES.index(tool_type) if tool_type in TOOL_TYPES else 0
        return WizardState(cursor=cursor)
    return replace(
        state,
        step=WizardStep.NAME_INPUT,
        buffer="",
        error="",
        draft=ToolDraft(tool_type=state.draft.tool_type),
    )


def _commit(state: WizardState) -> tuple[WizardState, Effect | None]:
    tool_type = state.draft.tool_type
    if tool_type is None:
        raise ValueError(f"No tool type chosen before {state.step.value}")

    if state.step is WizardStep.NAME_INPUT:
        try:
            name = validate_tool_name(state.buffer)
        except ValidationError as e:
            return replace(state, error=str(e)), None
        return (
            replace(
                state,
                step=WizardStep.DESCRIPTION_INPUT,
                buffer="",
                error="",
                draft=replace(state.draft, name=name),
            ),
            None,
        )

    name = state.draft.name
    if name is None:
        raise ValueError("No tool name entered before description_input")
    try:
        spec = ToolSpec.create(tool_type, name, state.buffer)
    except ValidationError as e:
        return replace(state, error=str(e)), None
    committed = replace(
        state,
        error="",
        draft=replace(state.draft, description=spec.description),
        spec=spec,
    )
    return committed, Generate(spec)


def resolve_generation(
    state: WizardState, outcome: ScaffoldResult | GeneratorError
) -> WizardState:
    """Move to COMPLETION or ERROR once the scaffolder has run."""
    spec = state.spec
    if spec is None:
        raise ValueError("No generation is pending for this wizard")

    if isinstance(outcome, GeneratorError):
        return replace(
            state,
            step=WizardStep.ERROR,
            buffer="",
            cursor=0,
            success="",
            error=f"Error generating tool: {outcome}",
            created=(),
        )
    return replace(
        state,
        step=WizardStep.COMPLETION,
        buffer="",
        cursor=0,
        error="",
        success=f"Successfully generated {spec.tool_type.value} tool: {spec.name}",
        created=outcome.paths,
    )


def render(state: WizardState) -> str:
    """Render the wizard as Rich markup."""
    lines = [styles.title("🛠️  Tool Generator"), ""]

    if state.step is WizardStep.TOOL_TYPE_SELECT:
        lines.append("Select the type of tool to generate:")
        lines.append("")
        lines.extend(styles.menu_lines(CHOICES, state.cursor))
        lines.append("")
        lines.append(styles.styled(styles.HELP, SELECT_HELP))
    elif state.step.is_text_entry:
        tool_type = state.draft.tool_type
        label = tool_type.label if tool_type else "Tool"
        is_name = state.step is WizardStep.NAME_INPUT
        lines.append(f"Creating {escape(label)}")
        if not is_name and state.draft.name:
            lines.append(f"Name: {escape(state.draft.name)}")
        lines.append("")
        lines.append(NAME_PROMPT if is_name else DESCRIPTION_PROMPT)
        lines.append(styles.styled(styles.INPUT, escape(state.buffer + styles.CURSOR)))
        lines.append("")
        examples = NAME_EXAMPLES if is_name else DESCRIPTION_EXAMPLES
        lines.append(styles.styled(styles.HELP, examples))
        lines.append(styles.styled(styles.HELP, INPUT_HELP))
    elif state.step is WizardStep.COMPLETION:
        spec = state.spec
        lines.append("Tool Generation Complete!")
        lines.append("")
        lines.append(styles.styled(styles.SUCCESS, f"✓ {escape(state.success)}"))
        lines.append("")
        if spec is not None:
            lines.append(f"Tool: {escape(spec.name)}")
            lines.append(f"Type: {spec.tool_type.value}")
            lines.append(f"Description: {escape(spec.description)}")
            lines.append("")
        lines.append("Files created:")
        lines.extend(f"  • {escape(str(path))}" for path in state.created)
        lines.append("")
        lines.append(styles.styled(styles.HELP, escape(COMPLETION_HELP)))
    else:
        lines.append("Tool Generation Failed")
        lines.append("")
        lines.append(styles.styled(styles.HELP, escape(ERROR_HELP)))

    if state.error:
        lines.append("")
        lines.append(styles.styled(styles.ERROR, f"✗ {escape(state.error)}"))

    return "\n".join(lines) + "\n"
