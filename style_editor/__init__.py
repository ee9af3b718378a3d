"""Style Editor: browse, edit and export interface style documents."""
