from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, TextIO

from ..codec import read_bitmap, write_bitmap
from ..errors import BitmapError, InvalidParameter
from ..raster import Raster
from ..transforms import FilterDefinition, FilterRegistry
from ..transforms.registry import Number

BANNER = "\n".join(
    [
        "*******************************",
        "*                             *",
        "*    IMAGE PROCESSING MENU    *",
        "*                             *",
        "*******************************",
    ]
)
QUIT_KEYS = {"q", "Q"}


class ImageMenu:
    """Interactive prompt loop around the codec and filter registry."""

    def __init__(
        self,
        registry: Optional[FilterRegistry] = None,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        preview: Optional[Callable[[Raster], None]] = None,
    ) -> None:
        self.registry = registry or FilterRegistry()
        self._input = input_fn
        self._out = output or sys.stdout
        self._preview = preview
        self.filename = ""
        self.image = Raster.empty()

    def mainloop(self) -> int:
        self._say("Welcome to the bitmapkit image processing menu")
        try:
            self._load_image("Please enter input BMP filename: ")
            while self._step():
                pass
        except EOFError:
            self._say("")
        return 0

    def _step(self) -> bool:
        self._show_menu()
        selection = self._ask("Please enter a menu selection option (Q to quit): ").strip()
        if selection in QUIT_KEYS:
            self._say("Thanks for using bitmapkit!")
            return False
        if selection == "0":
            self._load_image("Please enter your new image filename: ")
            return True
        definition = self.registry.get(selection) if selection.isdigit() else None
        if definition is None:
            self._say("Please enter valid menu selection")
            return True
        self._run_filter(definition)
        return True

    def _show_menu(self) -> None:
        self._say("")
        self._say(BANNER)
        self._say("")
        self._say(f"0) Change image (current: {self.filename})")
        for definition in self.registry.filters:
            self._say(f"{definition.number}) {definition.label}")
        self._say("")

    def _load_image(self, prompt: str) -> None:
        while True:
            filename = self._ask(prompt).strip()
            try:
                image = read_bitmap(filename)
            except BitmapError as exc:
                self._say(str(exc))
                continue
            if image.is_empty:
                self._say(f"{filename} is not a supported uncompressed 24-bit BMP file")
                continue
            self.filename = filename
            self.image = image
            self._say(f"Loaded {filename} ({image.width}x{image.height})")
            return

    def _run_filter(self, definition: FilterDefinition) -> None:
        self._say(f"You have selected the {definition.label} filter.")
        values: Dict[str, Number] = {}
        for spec in definition.params:
            while True:
                try:
                    values[spec.name] = spec.parse(self._ask(spec.prompt))
                    break
                except InvalidParameter as exc:
                    self._say(str(exc))
        out_filename = self._ask("Please enter a unique file name to save the new image: ").strip()
        result = definition.run(self.image, values)
        try:
            write_bitmap(out_filename, result)
        except BitmapError as exc:
            self._say(str(exc))
            return
        if self._preview is not None:
            self._preview(result)
        self._say(f"The {definition.label} filter has been applied and saved as {out_filename}!")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _say(self, text: str) -> None:
        print(text, file=self._out)
