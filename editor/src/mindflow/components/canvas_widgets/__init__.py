"""Canvas widgets: drag-to-pan canvas"""
