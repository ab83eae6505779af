"""Tailwind CSS v3 scaffold template.

Provides:
- tailwind.config.js scanning the theme's Liquid, JS and HTML files,
  with preflight disabled and a ``tw-`` class prefix
- tailwind-config.css with the three @tailwind directives
"""
from __future__ import annotations

FILES: dict[str, str] = {
    "tailwind.config.js": """
/** @type {import('tailwindcss').Config} */
module.exports = {
  content: [
    "*.html",
    "./layout/*.liquid",
    "./sections/*.liquid",
    "./snippets/*.liquid",
    "./assets/*.js",
    "./tailwind-config.css",
  ],
  theme: {
    screens: {
      sm: "550px",
      md: "750px",
      lg: "990px",
    },
  },
  corePlugins: {
    preflight: false,
  },
  prefix: "tw-",
};
""",
    "tailwind-config.css": """
@tailwind base;
@tailwind components;
@tailwind utilities;
""",
}
