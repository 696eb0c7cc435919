"""Workspace/window snapshot derived from the i3 tree."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WindowNode(BaseModel):
    """A single manageable window."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="i3 container id, used in focus commands")
    window_class: str = Field(description="X11 WM_CLASS class, used for color lookup")
    title: Optional[str] = Field(default=None, description="Window title")


class Workspace(BaseModel):
    """A named workspace and its windows in tree traversal order."""

    model_config = ConfigDict(frozen=True)

    name: str
    windows: tuple[WindowNode, ...] = ()

    def window_at(self, slot: int) -> Optional[WindowNode]:
        """Get the window at a slot, or None past the end of the list."""
        if 0 <= slot < len(self.windows):
            return self.windows[slot]
        return None


# Ordered by grid column; rebuilt every control-loop iteration.
Layout = list[Workspace]
