"""Tailwind CSS v4 scaffold template: a CSS-first config inside assets/."""
from __future__ import annotations

FILES: dict[str, str] = {
    "assets/tailwind-config.css": """@import "tailwindcss" prefix(tw);

@theme {
    --breakpoint-sm: 450px;
    --breakpoint-md: 768px;
    --breakpoint-lg: 990px;
    --breakpoint-xl: 1280px;
}""",
}
