"""Static catalog of the skills, agents and commands the toolkit knows about."""

from __future__ import annotations

from uxkit.schemas.catalog import AgentInfo, CommandInfo, SkillInfo

SKILLS: tuple[SkillInfo, ...] = (
    # Core UX
    SkillInfo(name="ux-heuristics", description="Nielsen's 10 usability heuristics with evaluation methodology", category="core"),
    SkillInfo(name="wcag-accessibility", description="WCAG 2.2 compliance checklist and ARIA patterns", category="core"),
    SkillInfo(name="visual-design-system", description="Layout, typography, color theory, spacing systems", category="core"),
    SkillInfo(name="interaction-patterns", description="Micro-interactions, loading states, feedback mechanisms", category="core"),
    SkillInfo(name="mobile-responsive-ux", description="Touch targets, gestures, responsive patterns", category="core"),
    # Page structure
    SkillInfo(name="page-structure-patterns", description="Base requirements for page states, layout, and structure", category="structure"),
    SkillInfo(name="list-page-patterns", description="Filters, sorting, pagination, and grid/table displays", category="structure"),
    SkillInfo(name="detail-page-patterns", description="Headers, tabs, multi-column layouts, related data", category="structure"),
    SkillInfo(name="navigation-patterns", description="Sidebar, mobile drawer, breadcrumbs, app shell", category="structure"),
    # Components
    SkillInfo(name="modal-patterns", description="Confirmation, edit, selector, and wizard modals", category="component"),
    SkillInfo(name="form-patterns", description="Validation, field layouts, multi-step wizards", category="component"),
    SkillInfo(name="data-density-patterns", description="Dense layouts, z-index, overflow, readability", category="component"),
    SkillInfo(name="toast-notification-patterns", description="Toast notifications, alerts, and system feedback", category="component"),
    # Interaction
    SkillInfo(name="keyboard-shortcuts-patterns", description="Keyboard shortcuts, command palette (Cmd+K), power user navigation", category="interaction"),
    SkillInfo(name="drag-drop-patterns", description="Drag and drop interactions, visual feedback, drop zones", category="interaction"),
    # Editor / workspace
    SkillInfo(name="editor-workspace-patterns", description="Multi-tab editors, dirty state, real-time validation, workspaces", category="editor"),
    SkillInfo(name="comparison-patterns", description="Side-by-side comparison, diff highlighting, multi-item comparison", category="editor"),
    SkillInfo(name="split-panel-patterns", description="Resizable panels, dividers, collapsible sidebars, synchronized views", category="editor"),
    # Game / interactive
    SkillInfo(name="canvas-grid-patterns", description="Hex grids, tactical maps, pan/zoom, tokens, coordinate systems", category="game"),
    SkillInfo(name="turn-based-ui-patterns", description="Phase banners, turn indicators, action bars, game state feedback", category="game"),
    SkillInfo(name="playback-replay-patterns", description="VCR controls, timeline scrubbing, speed selection, replay viewers", category="game"),
    SkillInfo(name="status-visualization-patterns", description="Health bars, progress meters, heat gauges, pip displays, stat blocks", category="game"),
    # Data display
    SkillInfo(name="info-card-patterns", description="Compact/standard/expanded cards, stat blocks, badges, entity displays", category="data"),
    SkillInfo(name="event-timeline-patterns", description="Activity feeds, audit logs, chronological events, filtering, infinite scroll", category="data"),
    # Framework
    SkillInfo(name="react-ux-patterns", description="React/Next.js specific UX patterns", category="framework"),
)

AGENTS: tuple[AgentInfo, ...] = (
    # General purpose
    AgentInfo(name="ux-auditor", description="Full UX audit against heuristics (read-only)", mode="analysis"),
    AgentInfo(name="ux-engineer", description="UX analysis + implements fixes", mode="fix"),
    AgentInfo(name="accessibility-auditor", description="WCAG 2.2 compliance review (read-only)", mode="analysis"),
    AgentInfo(name="accessibility-engineer", description="Accessibility fixes", mode="fix"),
    AgentInfo(name="visual-reviewer", description="Design system consistency check", mode="analysis"),
    AgentInfo(name="interaction-reviewer", description="Micro-interactions and feedback review", mode="analysis"),
    # Page reviewers
    AgentInfo(name="list-page-reviewer", description="List/browse page UX review", mode="analysis"),
    AgentInfo(name="detail-page-reviewer", description="Detail/entity page UX review", mode="analysis"),
    AgentInfo(name="navigation-reviewer", description="Navigation and routing review", mode="analysis"),
    AgentInfo(name="form-reviewer", description="Form and input UX review", mode="analysis"),
    AgentInfo(name="density-reviewer", description="Data density and layout review", mode="analysis"),
    # Advanced reviewers
    AgentInfo(name="editor-reviewer", description="Editor/workspace UI with multi-tab, drag-drop, validation", mode="analysis"),
    AgentInfo(name="comparison-reviewer", description="Side-by-side comparison and diff UIs", mode="analysis"),
    AgentInfo(name="settings-reviewer", description="Settings, preferences, and configuration pages", mode="analysis"),
    # Game & interactive
    AgentInfo(name="game-ui-reviewer", description="Tactical maps, turn-based combat, status displays, hex grids", mode="analysis"),
    AgentInfo(name="replay-reviewer", description="Playback controls, timeline scrubbing, event feeds", mode="analysis"),
    AgentInfo(name="card-reviewer", description="Info cards, stat blocks, entity displays with density levels", mode="analysis"),
    AgentInfo(name="panel-reviewer", description="Resizable panels, collapsible sidebars, split views", mode="analysis"),
)

COMMANDS: tuple[CommandInfo, ...] = (
    CommandInfo(name="ux-audit", description="Comprehensive UX audit"),
    CommandInfo(name="a11y-check", description="Quick accessibility scan"),
    CommandInfo(name="design-review", description="Visual consistency check"),
    CommandInfo(name="screenshot-review", description="Visual review from screenshot"),
)


def agent_names() -> list[str]:
    return [a.name for a in AGENTS]


def command_names() -> list[str]:
    return [c.name for c in COMMANDS]


def skills_by_category() -> dict[str, list[SkillInfo]]:
    """Group skills by category, preserving catalog order."""
    grouped: dict[str, list[SkillInfo]] = {}
    for skill in SKILLS:
        grouped.setdefault(skill.category, []).append(skill)
    return grouped
