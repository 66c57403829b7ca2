"""Interactive drill-down through an outline."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from ..exceptions import SelectionCancelled, UnresolvableSelectionError
from ..parser.hierarchy import ROOT, Node, Outline
from ..tree.path import path_to_string
from ..tree.query import children_of, find_by_id, is_branch

logger = logging.getLogger(__name__)

PROMPT_PREFIX = "Find entry: "
CURRENT_LABEL = "."


class SelectionProvider(Protocol):
    def present(self, prompt: str, options: Sequence[str]) -> str:
        """Block until one of ``options`` is chosen; raise SelectionCancelled on abort."""
        ...


class Jumper(Protocol):
    def jump_to_line(self, line: int) -> None:
        ...


@dataclass
class NavigationState:
    """
    State of one drill-down session.

    ``path`` holds every chosen node in selection order, so the prompt
    breadcrumb reads from the first choice down to the current node.
    """
    outline: Outline
    current: Node = ROOT
    path: list[Node] = field(default_factory=list)
    running: bool = True

    def prompt(self) -> str:
        return PROMPT_PREFIX + path_to_string(self.path) + "/"

    def options(self) -> list[tuple[str, Node]]:
        """The current node (labelled ".") followed by its children."""
        options = [(CURRENT_LABEL, self.current)]
        options.extend((child.title, child) for child in children_of(self.outline, self.current))
        return options

    def step(self, provider: SelectionProvider) -> Node:
        """Present one choice, then narrow to the chosen node."""
        options = self.options()

        label_to_id: dict[str, int] = {}
        for label, node in options:
            # Equal labels are indistinguishable; the first one wins.
            label_to_id.setdefault(label, node.id)

        prompt = self.prompt()
        choice = provider.present(prompt, [label for label, _ in options])

        node_id = label_to_id.get(choice)
        chosen = find_by_id(self.outline, node_id) if node_id is not None else None
        if chosen is None:
            raise UnresolvableSelectionError(f"Provider returned unknown option {choice!r} for prompt {prompt!r}")

        self.running = is_branch(self.outline, chosen) and chosen != self.current
        self.current = chosen
        self.path.append(chosen)
        logger.debug("Selected %r (id=%d, running=%s)", chosen.title, chosen.id, self.running)
        return chosen


def navigate(outline: Outline, provider: SelectionProvider, jumper: Jumper) -> Optional[Node]:
    """
    Drill down from the root until a leaf or "." is chosen, then jump.

    Returns the node jumped to, or None when the session ended on the
    root or was cancelled.
    """
    state = NavigationState(outline=outline, current=outline.root)
    try:
        while state.running:
            state.step(provider)
    except SelectionCancelled:
        logger.info("Navigation cancelled after %d selection(s)", len(state.path))
        return None

    if state.current.is_root:
        logger.info("Navigation ended at root; nothing to jump to")
        return None

    logger.info("Jumping to %r at line %d", state.current.title, state.current.line)
    jumper.jump_to_line(state.current.line)
    return state.current
