"""TaskDeck core library: kanban board state, engines and persistence.

Public API re-exports for convenient imports:
    from taskdeck import Board, command_from_key, load_projects, ...
"""

__version__ = "0.2.0"

# Workspace & settings
from taskdeck.workspace import (
    data_root,
    kanban_path,
    settings_path,
    log_path,
    load_settings,
    get_user_timezone,
    now_local,
    date_bar,
)

# File I/O
from taskdeck.fileio import (
    read_text,
    read_json,
    read_yaml,
    touch,
    write_json_atomic,
)

# Models
from taskdeck.models import (
    Column,
    Tab,
    Popup,
    Project,
    Selection,
    FocusState,
    InputBuffer,
    DailyTask,
    TaskStep,
    Settings,
)

# Store
from taskdeck.store import (
    ProjectStore,
    load_projects,
    save_projects,
)

# Engines
from taskdeck.navigation import (
    move_within_column,
    change_column_focus,
    reset_selection,
    switch_project,
)
from taskdeck.transitions import (
    delete_with_reindex,
    delete_selected,
    move_item,
    selected_item,
)
from taskdeck.modal import ModalController

# Commands & dispatch
from taskdeck.commands import Action, Command, Modifier
from taskdeck.keys import command_from_key
from taskdeck.board import Board, Outcome
