"""
toolbox: interactive terminal toolbox with a tool scaffolding wizard.

Architecture:
    KeyPress → NavigationController → Screen (MainMenu | FeatureScreen | GeneratorWizard)
    GeneratorWizard → Generate effect → Scaffolder → TemplateRenderer → files on disk

Layers:
    - generator/: ToolSpec model, validation, templates, rendering, scaffolding
    - tui/: pure screen/wizard state machines, controller, Textual driver
    - cli/: Rich formatting helpers for the Click entry point
"""

__version__ = "0.1.0"
