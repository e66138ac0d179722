"""
YAMLResume - resumes as code

Turns a structured resume document (YAML or JSON) into typeset LaTeX, HTML or
Markdown text.

Architecture:
- Schema Context: Field rules, section schemas and the document schema
- Validation Context: Source parsing with positions and error collection
- Templating Context: Translations, summary markup and the computed view
- Rendering Context: LaTeX/HTML/Markdown renderers and build orchestration
"""

__version__ = "0.1.0"
