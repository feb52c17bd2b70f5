"""
Prompt phase: turn catalog + answers into one Installer record.

Question order follows CATEGORIES, then SETTING_QUESTIONS, then the git
identity (only when the user asked for it).
"""

from archsetup.catalog import Catalog
from archsetup.models import CATEGORIES, GitIdentity, Installer, Packages, Settings
from archsetup.prompter import Prompter


CATEGORY_QUESTIONS: dict[str, str] = {
    "software":             "Which software packages do you want to install?",
    "service":              "Which services do you want to install?",
    "font":                 "Which fonts do you want to install?",
    "programming_language": "Which programming languages do you want to install?",
    "utility":              "Which utilities do you want to install?",
}

# (Settings field, question, default)
SETTING_QUESTIONS: tuple[tuple[str, str, bool], ...] = (
    ("install_paru",    "Keep paru installed?",        True),
    ("install_bedrock", "Install Bedrock Linux?",      True),
    ("install_omf",     "Install Oh My Fish?",         True),
    ("change_shell",    "Change shell to fish?",       True),
    ("enable_services", "Enable installed services?",  True),
    ("set_git_config",  "Set git username and email?", True),
)


def collect_installer(catalog: Catalog, prompter: Prompter) -> Installer:
    packages = Packages(**{
        category: prompter.select_many(CATEGORY_QUESTIONS[category], catalog.items(category))
        for category in CATEGORIES
    })

    settings = Settings(**{
        name: prompter.confirm(question, default)
        for name, question, default in SETTING_QUESTIONS
    })

    git_identity = None
    if settings.set_git_config:
        git_identity = GitIdentity(
            name=prompter.ask_text("Git name"),
            email=prompter.ask_text("Git email"),
        )

    return Installer(packages=packages, settings=settings, git_identity=git_identity)
