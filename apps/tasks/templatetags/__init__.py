"""
Template tags package for tasks app.

Provides custom template filters for the Kanban board:
- truncate_title: Shorten long titles for cards
- deadline_urgency: overdue / upcoming / normal
- deadline_class: CSS class for a deadline's urgency
- format_deadline: "MMM d, yyyy HH:mm" display of a deadline
- status_display: Column name for a status
"""
