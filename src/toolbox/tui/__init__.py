"""Interactive session: screens, generator wizard and navigation controller."""

from toolbox.tui.controller import NavigationController
from toolbox.tui.keys import KeyPress
from toolbox.tui.screens import FeatureScreen, GeneratorWizard, MainMenu, Screen
from toolbox.tui.wizard import WizardState, WizardStep

__all__ = [
    "FeatureScreen",
    "GeneratorWizard",
    "KeyPress",
    "MainMenu",
    "NavigationController",
    "Screen",
    "WizardState",
    "WizardStep",
]
