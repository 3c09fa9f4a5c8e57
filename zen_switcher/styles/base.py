"""Central CSS definitions for zen-switcher."""

# Modal base styles - all modals inherit these
MODAL_CSS = """
/* Modal base positioning */
.modal-base {
    align: center top;
    padding-top: 3;
}

/* Dialog container base - elastic height */
.modal-base #dialog {
    height: auto;
    max-height: 90%;
    padding: 1 2;
    background: $surface;
    border: round $surface-lighten-1;
}

.modal-md #dialog {
    width: 60vw;
    min-width: 50;
    max-width: 80;
}

.modal-lg #dialog {
    width: 70vw;
    min-width: 60;
    max-width: 100;
}
"""

# Common UI patterns shared across components
COMMON_CSS = """
/* Dialog title - centered, muted */
.dialog-title {
    text-align: center;
    width: 100%;
    margin-bottom: 1;
    color: $text-muted;
}

/* Dialog hint text - bottom of modals */
.dialog-hint {
    text-align: center;
    color: $text-disabled;
    margin-top: 1;
}

/* Standard list row styling */
.list-row {
    height: 1;
    padding: 0 1;
}

.list-row:hover {
    background: $surface-lighten-1;
}

.list-row.selected {
    background: $surface-lighten-1;
}

/* Empty list placeholder */
.empty-list {
    color: $text-disabled;
    padding: 1;
    text-align: center;
}
"""

# Combined base CSS for import
BASE_CSS = MODAL_CSS + COMMON_CSS
