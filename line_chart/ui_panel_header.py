from __future__ import annotations

import tkinter as tk
from tkinter import ttk


class HeaderPanel:
    def __init__(self, owner, parent: tk.Widget) -> None:
        self.owner = owner
        style = owner.chart_style
        self.frame = ttk.Frame(parent)
        self.frame.pack(side="top", fill="x")

        owner.title_label = None
        owner.legend_label = None

        if owner.title_text is not None:
            owner.title_label = tk.Label(
                self.frame,
                text=owner.title_text,
                font=("TkDefaultFont", 18, "bold"),
                fg=style.text_color,
                bg=style.background_color,
                justify="center",
            )
            owner.title_label.pack(side="top", fill="x")
            # wrap long titles to the available width
            self.frame.bind(
                "<Configure>",
                lambda e: owner.title_label.configure(wraplength=max(50, e.width - 10)),
            )

        if owner.legend_text is not None:
            owner.legend_label = tk.Label(
                self.frame,
                text=owner.legend_text,
                font=("TkDefaultFont", 11),
                fg=style.legend_text_color,
                bg=style.background_color,
            )
            owner.legend_label.pack(side="top", fill="x")
