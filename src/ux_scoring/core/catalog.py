"""Static tool catalog.

Thirty tools in display order. Checklist ids are positional ("1".."n") within
each tool, so the aggregator's item count always matches the declared items.
"""

from __future__ import annotations

from typing import Optional

from . import calculators
from .models import (
    ChecklistItem,
    InputKind,
    InputOption,
    InputValue,
    Priority,
    ToolCategory,
    ToolDefinition,
    ToolInput,
    ToolType,
)

HIGH, MEDIUM, LOW = Priority.HIGH, Priority.MEDIUM, Priority.LOW


def _checklist(*entries: tuple[str, Priority]) -> tuple[ChecklistItem, ...]:
    return tuple(ChecklistItem(id=str(n), text=text, priority=priority) for n, (text, priority) in enumerate(entries, 1))


def _number(input_id: str, label: str, default: Optional[int] = None) -> ToolInput:
    return ToolInput(id=input_id, label=label, kind=InputKind.NUMBER, default_value=default)


def _text(input_id: str, label: str, placeholder: str) -> ToolInput:
    return ToolInput(id=input_id, label=label, kind=InputKind.TEXT, placeholder=placeholder)


def _choice(input_id: str, label: str, kind: InputKind, options: list[tuple[str, InputValue]]) -> ToolInput:
    return ToolInput(
        id=input_id,
        label=label,
        kind=kind,
        options=[InputOption(label=opt_label, value=value) for opt_label, value in options],
    )


def _rating(input_id: str, label: str, *answers: str) -> ToolInput:
    """A 1-5 maturity question; answers are listed from lowest to highest."""
    return _choice(input_id, label, InputKind.RADIO, [(answer, n) for n, answer in enumerate(answers, 1)])


TOOLS: tuple[ToolDefinition, ...] = (
    # ─── General ─────────────────────────────────────────────────────────────
    ToolDefinition(
        id="ux-audit-web",
        slug="ux-audit-web",
        name="UX Audit Checklist — Web",
        category=ToolCategory.GENERAL,
        description="A comprehensive heuristic checklist for desktop web interfaces.",
        long_description="Evaluate your website against 12 key usability heuristics and get an instant UX health score.",
        how_it_works="Check off best practices to generate a UX health score.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Value proposition is clear above the fold", HIGH),
            ("Single primary action per view", HIGH),
            ("Consistent spacing system used", MEDIUM),
            ("Typography is readable (size/contrast)", HIGH),
            ("Navigation labels are descriptive", MEDIUM),
            ("Visual hierarchy guides the eye", HIGH),
            ("Interactive elements show feedback", MEDIUM),
            ("Error messages explain how to fix", HIGH),
            ("Forms have visible labels", HIGH),
            ("Perceived performance is fast", MEDIUM),
            ("Contrast meets accessibility standards", HIGH),
            ("Layout adapts to screen resizing", HIGH),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="ux-audit-mobile",
        slug="ux-audit-mobile",
        name="UX Audit Checklist — Mobile",
        category=ToolCategory.GENERAL,
        description="Ensure your mobile experience is touch-friendly and responsive.",
        long_description="Check 12 mobile usability best practices to make sure your app is touch-friendly and responsive.",
        how_it_works="Evaluate specific mobile usability heuristics.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Tap targets are at least 44x44px", HIGH),
            ("Text is readable without zooming", HIGH),
            ("No horizontal scrolling required", HIGH),
            ("Primary actions in thumb zone", MEDIUM),
            ("Safe areas (notch/bar) respected", MEDIUM),
            ("Inputs trigger correct keyboard", MEDIUM),
            ("Typing requirements are minimized", MEDIUM),
            ("Back/Close actions are obvious", HIGH),
            ("Loading states provided", MEDIUM),
            ("Errors are recoverable", HIGH),
            ("Contrast readable outdoors", HIGH),
            ("No hover-dependent navigation", HIGH),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="usability-checklist",
        slug="usability-checklist",
        name="Usability Checklist",
        category=ToolCategory.GENERAL,
        description="Broad usability principles based on cognitive psychology.",
        long_description="Verify your interface against 10 core usability laws drawn from cognitive psychology.",
        how_it_works="Verify your interface against core usability laws.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Interface uses familiar language", HIGH),
            ("Users can undo/redo actions", HIGH),
            ("Consistent patterns across screens", MEDIUM),
            ("System prevents common errors", HIGH),
            ("Smart defaults are provided", MEDIUM),
            ("System status is always visible", HIGH),
            ("Recognition over recall", MEDIUM),
            ("Accelerators for power users", LOW),
            ("Aesthetic and minimalist design", MEDIUM),
            ("Help/Docs available contextually", LOW),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="ux-maturity-score",
        slug="ux-maturity-score",
        name="UX Maturity Score",
        category=ToolCategory.GENERAL,
        description="Assess how well your organization integrates design.",
        long_description="Rate 10 organizational habits to measure how well your company integrates user experience design.",
        how_it_works="Rate 10 organizational habits to see your maturity level.",
        type=ToolType.QUESTIONNAIRE,
        inputs=[
            _rating("q1", "User Research Cadence", "None", "Ad-hoc", "Regular", "Continuous", "Strategic"),
            _rating("q2", "Analytics Usage", "None", "Basic", "Regular", "Actionable", "Predictive"),
            _rating("q3", "Design System", "None", "Inconsistent", "Basic", "Consistent", "Governance"),
            _rating("q4", "Accessibility", "Ignored", "Afterthought", "Checked", "Integrated", "Culture"),
            _rating("q5", "Usability Testing", "Never", "Rarely", "Before Launch", "During Dev", "Always"),
            _rating("q6", "UX Ownership", "No one", "Shared", "Dedicated", "Team", "Exec Level"),
            _rating("q7", "Feedback Loop", "None", "Slow", "Occasional", "Fast", "Real-time"),
            _rating("q8", "Documentation", "None", "Sparse", "Outdated", "Maintained", "Automated"),
            _rating("q9", "Onboarding", "None", "Confusing", "Exists", "Helpful", "Personalized"),
            _rating("q10", "Performance", "Ignored", "Reactive", "Aware", "Optimized", "Budgeted"),
        ],
        calculate=calculators.ux_maturity,
    ),
    ToolDefinition(
        id="ux-issues-prioritizer",
        slug="ux-issues-prioritizer",
        name="UX Issues Prioritizer",
        category=ToolCategory.GENERAL,
        description="Prioritize fixes based on Impact vs Effort matrix.",
        long_description="Identify and rank your most critical UX problems to fix first using an impact vs effort matrix.",
        how_it_works="Select issues you have and their fix effort to get a prioritized list.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Too many CTAs (High Impact)", HIGH),
            ("Confusing nav labels (High Impact)", HIGH),
            ("Weak hierarchy (Med Impact)", MEDIUM),
            ("Form too long (High Impact)", HIGH),
            ("Poor error messages (Med Impact)", MEDIUM),
            ("Low contrast (Med Impact)", MEDIUM),
            ("Slow perceived load (High Impact)", HIGH),
            ("No empty states (Low Impact)", LOW),
            ("Unclear pricing (High Impact)", HIGH),
            ("No social proof (Med Impact)", MEDIUM),
            ("Hard to scan text (Med Impact)", MEDIUM),
            ("Mobile tap targets too small (High Impact)", HIGH),
        ),
        calculate=calculators.issues_prioritizer,
    ),
    # ─── Conversion ──────────────────────────────────────────────────────────
    ToolDefinition(
        id="above-the-fold-checklist",
        slug="above-the-fold-checklist",
        name="Above-the-Fold Checklist",
        category=ToolCategory.CONVERSION,
        description="Optimize the first screen users see to reduce bounce rate.",
        long_description="Ensure the first screen users see contains all critical elements for conversion.",
        how_it_works="Check key elements that must be visible without scrolling.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Headline states value clearly", HIGH),
            ("Subheadline supports headline", MEDIUM),
            ("Primary CTA visible immediately", HIGH),
            ("Visual shows product/context", HIGH),
            ("Social proof snippet visible", MEDIUM),
            ("No distracting secondary CTAs", MEDIUM),
            ("Key benefits scannable", MEDIUM),
            ("Trust cues present", LOW),
            ("Navigation not overwhelming", MEDIUM),
            ("Mobile fold content is prioritized", HIGH),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="cta-clarity-checker",
        slug="cta-clarity-checker",
        name="CTA Clarity Checker",
        category=ToolCategory.CONVERSION,
        description="Validate your Call-to-Action text for impact.",
        long_description="Ensure your button labels are clear, action-oriented, and optimized for clicks.",
        how_it_works="Enter your CTA label to check for best practices.",
        type=ToolType.VALIDATOR,
        inputs=[_text("cta", "Button Label", "e.g. Get Started")],
        calculate=calculators.cta_clarity,
    ),
    ToolDefinition(
        id="cta-count-validator",
        slug="cta-count-validator",
        name="CTA Count Validator",
        category=ToolCategory.CONVERSION,
        description="Calculate friction caused by competing calls to action.",
        long_description="Check if you have too many calls to action and reduce cognitive load.",
        how_it_works="Enter number of CTAs to see if you are overwhelming users.",
        type=ToolType.CALCULATOR,
        inputs=[_number("primary", "Primary CTAs", 1), _number("secondary", "Secondary CTAs", 0)],
        calculate=calculators.cta_count,
    ),
    ToolDefinition(
        id="funnel-friction-score",
        slug="funnel-friction-score",
        name="Funnel Friction Score",
        category=ToolCategory.CONVERSION,
        description="Estimate drop-off risk based on funnel complexity.",
        long_description="Analyze your conversion funnel complexity and identify friction points.",
        how_it_works="Answer questions about your flow to estimate friction.",
        type=ToolType.QUESTIONNAIRE,
        inputs=[
            _number("steps", "Steps to complete goal", 3),
            _choice("signup", "Required signup before value?", InputKind.SELECT, [("Yes", 1), ("No", 0)]),
            _number("fields", "Total form fields", 4),
        ],
        calculate=calculators.funnel_friction,
    ),
    ToolDefinition(
        id="value-prop-clarity-check",
        slug="value-prop-clarity-check",
        name="Value Prop Clarity Check",
        category=ToolCategory.CONVERSION,
        description="Ensure your messaging resonates instantly.",
        long_description="Make sure your value proposition resonates instantly and clearly communicates your unique value.",
        how_it_works="Verify your value proposition against clarity rules.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("States who it is for", HIGH),
            ("States what it does", HIGH),
            ("States benefit/outcome", HIGH),
            ("Differentiation is clear", MEDIUM),
            ("No industry jargon", MEDIUM),
            ("Reads in 5 seconds", HIGH),
            ("Matches visual context", MEDIUM),
            ("CTA matches promise", HIGH),
            ("Proof supports claim", MEDIUM),
            ("Consistent across page", LOW),
        ),
        calculate=calculators.standard_checklist,
    ),
    # ─── Forms ───────────────────────────────────────────────────────────────
    ToolDefinition(
        id="form-ux-checklist",
        slug="form-ux-checklist",
        name="Form UX Checklist",
        category=ToolCategory.FORMS,
        description="Audit your forms for usability and conversion.",
        long_description="Reduce friction and improve conversion with 9 proven form best practices.",
        how_it_works="Check best practices and input field counts to score your form.",
        type=ToolType.CHECKLIST,
        inputs=[_number("fields", "Total Fields", 4), _number("optional", "Optional Fields", 0)],
        checklist=_checklist(
            ("Labels visible (not just placeholder)", HIGH),
            ("Inline validation present", HIGH),
            ("Error messages actionable", HIGH),
            ("Logical grouping of fields", MEDIUM),
            ("Appropriate input types used", MEDIUM),
            ("Autofill/Autocomplete supported", HIGH),
            ("Clear submit CTA", HIGH),
            ("Privacy reassurance included", MEDIUM),
            ("Success confirmation clear", MEDIUM),
        ),
        calculate=calculators.form_ux,
    ),
    ToolDefinition(
        id="form-field-count-impact",
        slug="form-field-count-impact",
        name="Form Field Count Impact",
        category=ToolCategory.FORMS,
        description="See how form length impacts conversion friction.",
        long_description="Understand friction levels based on your number of form fields.",
        how_it_works="Enter field count to estimate friction level.",
        type=ToolType.CALCULATOR,
        inputs=[_number("fields", "Number of Fields", 5)],
        calculate=calculators.form_field_count,
    ),
    ToolDefinition(
        id="password-ux-checklist",
        slug="password-ux-checklist",
        name="Password UX Checklist",
        category=ToolCategory.FORMS,
        description="Ensure password fields don't frustrate users.",
        long_description="Ensure your password fields follow best practices for sign-up conversion.",
        how_it_works="Check your password creation/entry flow.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Show/hide toggle available", HIGH),
            ("Requirements visible before error", HIGH),
            ("Strength indicator present", MEDIUM),
            ("Avoid overly strict rules", HIGH),
            ("Clear error messages", HIGH),
            ("Paste allowed", HIGH),
            ("Forgot password link visible", HIGH),
            ("Confirm password only if needed", MEDIUM),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="error-message-ux-checklist",
        slug="error-message-ux-checklist",
        name="Error Message UX Checklist",
        category=ToolCategory.FORMS,
        description="Improve error recovery with better messaging.",
        long_description="Write better error messages that help users fix problems quickly.",
        how_it_works="Verify your error handling patterns.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("States exactly what happened", HIGH),
            ("States how to fix it", HIGH),
            ("Uses plain language", MEDIUM),
            ("No blaming tone", MEDIUM),
            ("Highlights field with error", HIGH),
            ("Preserves user input", HIGH),
            ("Does not block unnecessarily", MEDIUM),
            ("Works on mobile", HIGH),
        ),
        calculate=calculators.standard_checklist,
    ),
    # ─── Accessibility ───────────────────────────────────────────────────────
    ToolDefinition(
        id="accessibility-quick-check",
        slug="accessibility-quick-check",
        name="Accessibility Quick Check",
        category=ToolCategory.ACCESSIBILITY,
        description="A rapid audit for basic accessibility compliance.",
        long_description="Rapidly audit your website for basic accessibility issues and get instant feedback.",
        how_it_works="Check key a11y specs and heuristics.",
        type=ToolType.CHECKLIST,
        inputs=[_number("text", "Body Text Size (px)", 16), _number("btn", "Button Height (px)", 44)],
        checklist=_checklist(
            ("Focus states visible", HIGH),
            ("Keyboard navigable", HIGH),
            ("Labels associated with inputs", HIGH),
            ("Alt text for images", HIGH),
            ("Color not sole indicator", HIGH),
            ("Adequate contrast generally", HIGH),
        ),
        calculate=calculators.accessibility_quick_check,
    ),
    ToolDefinition(
        id="button-size-checker",
        slug="button-size-checker",
        name="Button Size Checker",
        category=ToolCategory.ACCESSIBILITY,
        description="Check if your buttons meet touch target standards.",
        long_description="Verify your buttons meet WCAG and mobile accessibility standards for touch targets.",
        how_it_works="Enter button height to check compliance.",
        type=ToolType.VALIDATOR,
        inputs=[_number("height", "Button Height (px)", 40)],
        calculate=calculators.button_size,
    ),
    ToolDefinition(
        id="font-size-checker",
        slug="font-size-checker",
        name="Font Size Readability Checker",
        category=ToolCategory.ACCESSIBILITY,
        description="Verify body text size for readability.",
        long_description="Verify your body text is legible and your typography meets accessibility standards.",
        how_it_works="Enter font size to check legibility.",
        type=ToolType.VALIDATOR,
        inputs=[_number("size", "Font Size (px)", 14)],
        calculate=calculators.font_size,
    ),
    ToolDefinition(
        id="contrast-calculator",
        slug="contrast-calculator",
        name="Color Contrast Calculator",
        category=ToolCategory.ACCESSIBILITY,
        description="Check WCAG contrast compliance for your color pairs.",
        long_description="Check if your foreground and background colors meet AA and AAA accessibility standards.",
        how_it_works="Enter foreground and background hex colors to calculate contrast ratio.",
        type=ToolType.VALIDATOR,
        inputs=[_text("fg", "Foreground Hex", "#000000"), _text("bg", "Background Hex", "#ffffff")],
        calculate=calculators.color_contrast,
    ),
    ToolDefinition(
        id="keyboard-accessibility-checklist",
        slug="keyboard-accessibility-checklist",
        name="Keyboard Accessibility Checklist",
        category=ToolCategory.ACCESSIBILITY,
        description="Ensure users can navigate without a mouse.",
        long_description="Verify tab order, focus states, and keyboard traps so users can navigate without a mouse.",
        how_it_works="Verify tab order, focus states, and traps.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Tab order is logical", HIGH),
            ("Focus rings clearly visible", HIGH),
            ("No keyboard traps", HIGH),
            ("Modals trap focus correctly", MEDIUM),
            ("Escape key closes dialogs", MEDIUM),
            ("Skip to content link exists", MEDIUM),
            ("Dropdowns accessible via keys", HIGH),
            ("Buttons are <button> not <div>", HIGH),
        ),
        calculate=calculators.standard_checklist,
    ),
    # ─── Navigation ──────────────────────────────────────────────────────────
    ToolDefinition(
        id="navigation-complexity-checker",
        slug="navigation-complexity-checker",
        name="Navigation Complexity Checker",
        category=ToolCategory.NAVIGATION,
        description="Assess if your menu structure is too deep.",
        long_description="Score your navigation depth and link count for optimal UX.",
        how_it_works="Input link counts and depth to score complexity.",
        type=ToolType.CALCULATOR,
        inputs=[_number("links", "Top Nav Links", 5), _number("levels", "Menu Depth Levels", 1)],
        calculate=calculators.navigation_complexity,
    ),
    ToolDefinition(
        id="menu-ux-checklist",
        slug="menu-ux-checklist",
        name="Menu UX Checklist",
        category=ToolCategory.NAVIGATION,
        description="Ensure menus are intuitive and usable.",
        long_description="Audit your navigation behavior and layout so menus stay intuitive, clear, and mobile-friendly.",
        how_it_works="Audit your menu behavior and layout.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Labels are clear/descriptive", HIGH),
            ("Grouping makes sense", MEDIUM),
            ("Current active state visible", HIGH),
            ("Mobile menu works well", HIGH),
            ("Does not overflow horizontally", MEDIUM),
            ("CTA separated from links", MEDIUM),
            ("No duplicate items", LOW),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="ia-checklist",
        slug="ia-checklist",
        name="IA Checklist",
        category=ToolCategory.NAVIGATION,
        description="Validate your Information Architecture.",
        long_description="Check naming conventions, hierarchy, and content organization of your site structure.",
        how_it_works="Check structure, naming, and hierarchy.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Categories match user mental model", HIGH),
            ("Consistent naming conventions", MEDIUM),
            ("Shallow depth for common tasks", HIGH),
            ("Related items grouped", MEDIUM),
            ("Search supports discovery", MEDIUM),
            ("No orphan pages", LOW),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="breadcrumb-checklist",
        slug="breadcrumb-checklist",
        name="Breadcrumb Checklist",
        category=ToolCategory.NAVIGATION,
        description="Ensure users know where they are.",
        long_description="Verify your breadcrumb implementation follows UX best practices.",
        how_it_works="Verify breadcrumb implementation.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Present on deep pages", HIGH),
            ("Reflects hierarchy", MEDIUM),
            ("Parent items clickable", HIGH),
            ("Current page not a link", MEDIUM),
            ("Short/Truncated labels", LOW),
            ("Consistent location", MEDIUM),
        ),
        calculate=calculators.standard_checklist,
    ),
    # ─── Mobile ──────────────────────────────────────────────────────────────
    ToolDefinition(
        id="mobile-readiness-checklist",
        slug="mobile-readiness-checklist",
        name="Mobile Readiness Checklist",
        category=ToolCategory.MOBILE,
        description="Essentials for a functional mobile web experience.",
        long_description="Audit your site for touch-friendly, mobile-optimized experiences.",
        how_it_works="Audit basic mobile responsiveness.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Tap targets ≥ 44px", HIGH),
            ("Text ≥ 16px", HIGH),
            ("No hover-only interactions", HIGH),
            ("Sticky elements don't block view", MEDIUM),
            ("Inputs use correct keyboard", MEDIUM),
            ("Safe areas respected", MEDIUM),
            ("Images responsive", MEDIUM),
            ("Modals fit screen", MEDIUM),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="thumb-reach-checker",
        slug="thumb-reach-checker",
        name="Thumb Reach Checker",
        category=ToolCategory.MOBILE,
        description="Check if UI elements are reachable single-handed.",
        long_description="Verify if your UI elements are reachable for single-handed phone use.",
        how_it_works="Select position of key elements to score reachability.",
        type=ToolType.QUESTIONNAIRE,
        inputs=[
            _choice(
                "primary",
                "Primary Action Position",
                InputKind.SELECT,
                [
                    ("Bottom Bar", 100),
                    ("Floating Action Btn (Bottom)", 90),
                    ("Middle Page", 70),
                    ("Top Right", 40),
                    ("Top Left", 20),
                ],
            ),
            _choice("nav", "Navigation Style", InputKind.SELECT, [("Bottom Tab", 100), ("Burger (Top)", 50)]),
        ],
        calculate=calculators.thumb_reach,
    ),
    ToolDefinition(
        id="mobile-form-checklist",
        slug="mobile-form-checklist",
        name="Mobile Form Checklist",
        category=ToolCategory.MOBILE,
        description="Optimize forms for touch and small screens.",
        long_description="Ensure your mobile inputs are user-friendly and conversion-ready.",
        how_it_works="Specific checks for mobile input experiences.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Correct keyboard types", HIGH),
            ("Autofill supported", HIGH),
            ("Large tappable inputs", HIGH),
            ("Inline errors", MEDIUM),
            ("Sticky submit doesn't cover fields", MEDIUM),
            ("Avoid tiny dropdowns", MEDIUM),
        ),
        calculate=calculators.standard_checklist,
    ),
    # ─── Onboarding ──────────────────────────────────────────────────────────
    ToolDefinition(
        id="onboarding-checklist",
        slug="onboarding-checklist",
        name="Onboarding Checklist",
        category=ToolCategory.ONBOARDING,
        description="Improve user activation and first-run experience.",
        long_description="Ensure your first-run experience helps users reach their aha moment quickly.",
        how_it_works="Check if your onboarding flows are helpful.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("First step is obvious", HIGH),
            ("Shows value quickly (Aha moment)", HIGH),
            ("Avoids account wall if possible", MEDIUM),
            ("Progressive disclosure used", MEDIUM),
            ("Avoids tooltip overload", MEDIUM),
            ("Skip option available", MEDIUM),
            ("Explains key terms", LOW),
            ("Celebrates first success", LOW),
        ),
        calculate=calculators.standard_checklist,
    ),
    # ─── States ──────────────────────────────────────────────────────────────
    ToolDefinition(
        id="empty-state-checklist",
        slug="empty-state-checklist",
        name="Empty State Checklist",
        category=ToolCategory.STATES,
        description="Make empty screens helpful and actionable.",
        long_description="Design actionable empty states that guide users to their next step.",
        how_it_works="Audit your zero-data states.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Explains why it is empty", HIGH),
            ("Shows what to do next", HIGH),
            ("Provides primary CTA", HIGH),
            ("Uses friendly/helpful tone", MEDIUM),
            ("Doesn't blame user", MEDIUM),
            ("Not visually overwhelmed", LOW),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="loading-feedback-checklist",
        slug="loading-feedback-checklist",
        name="Loading & Feedback Checklist",
        category=ToolCategory.STATES,
        description="Manage user expectations during waits.",
        long_description="Ensure your system communicates status clearly during waits and processes.",
        how_it_works="Check if your system communicates status well.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Shows skeleton for content", MEDIUM),
            ("Shows spinner for short waits", HIGH),
            ("Uses progress for long tasks", HIGH),
            ("Prevents duplicate submits", HIGH),
            ("Disables buttons appropriately", HIGH),
            ("Handles slow network gracefully", MEDIUM),
        ),
        calculate=calculators.standard_checklist,
    ),
    ToolDefinition(
        id="success-state-checklist",
        slug="success-state-checklist",
        name="Success State Checklist",
        category=ToolCategory.STATES,
        description="Confirm actions clearly to reassure users.",
        long_description="Design reassuring confirmation messages that guide users to their next step.",
        how_it_works="Verify confirmation messages and flows.",
        type=ToolType.CHECKLIST,
        checklist=_checklist(
            ("Confirms action succeeded", HIGH),
            ("Shows next step", MEDIUM),
            ("Allows undo when possible", MEDIUM),
            ("Updates UI immediately", HIGH),
            ("Accessible announcement", HIGH),
            ("Matches user intent", MEDIUM),
        ),
        calculate=calculators.standard_checklist,
    ),
)
