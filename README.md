# codebuddy

Screen state, theming and report generation for an interactive code review
tool. The package holds the data and logic behind each screen. It has no
terminal drawing code of its own.

## Modules

- `codebuddy.version`: `APP_NAME` and `APP_VERSION`.
- `codebuddy.theme`: the `Color` enum, the `Modifier` flags and the
  immutable `Style` (`fg`, `bg`, `modifiers`, with `with_fg`, `with_bg` and
  `with_modifier`). `Theme` is the palette. It provides the styles
  `title_style()`, `header_style()`, `success_style()`, `error_style()`,
  `warning_style()`, `info_style()`, `selected_style()`,
  `button_style(pressed)`, `button_hover_style()`, `button_normal_style()`
  and `primary_style()`. `THEME` is the default palette.
- `codebuddy.geometry`: `Rect(x, y, width, height)` with `contains(x, y)`
  for hit testing. The right and bottom edges are exclusive.
- `codebuddy.overview_state`: `OverviewWidgetState` for the main menu.
  - `move_selection(SelectionDirection.NEXT | PREVIOUS)` steps through
    `OverviewComponent` and wraps at both ends.
  - `update_hover(x, y)` and `is_over(component, x, y)` test against the
    rectangles in `registered_components`.
  - `RepoInfo` holds the repository path, the branches and the file count.
- `codebuddy.analysis_state`: `AnalysisWidgetState`.
  - `start_analysis()`, `update_progress(progress, current_file)` and
    `complete_analysis(review)` track a run. Completing sets progress to
    100.0 and resets the selection.
  - `move_issue_selection(direction)` moves the selection and clamps it to
    the review's issue list.
- `codebuddy.credits_state`: `CreditsWidgetState`.
  - `scroll_up()` and `scroll_down()` move by five lines. Scrolling down
    stops once the offset reaches `total_lines - 20`.
  - `is_over(component, x, y)` tests against the registered rectangles.
- `codebuddy.reports_state`: `ReportsWidgetState`.
  - `next_format()` and `previous_format()` cycle through `ReportFormat`:
    `SUMMARY`, `DETAILED`, `JSON` and `MARKDOWN`.
  - `start_export(format)` and `complete_export(path)` update
    `export_status`. This is an `ExportStatus` whose `phase` is `"none"`,
    `"exporting"` or `"success"`. Its `detail` holds the format or the
    path.
  - `generate_report()` renders the current review.

## Reviews

A review is any object with these attributes:

- `files_count`, `issues_count`, `critical_issues`, `high_issues`,
  `medium_issues` and `low_issues`
- `issues`, a list of objects with `file`, `line`, `severity`, `category`,
  `description` and `commit_status`

The recognised severities are `"Critical"`, `"High"`, `"Medium"` and
`"Low"`. In the detailed report, issues with any other severity are listed
under Low.

## Example

```python
from types import SimpleNamespace

from codebuddy.reports_state import ReportFormat, ReportsWidgetState

issue = SimpleNamespace(file="src/auth.rs", line=42, severity="Critical",
                        category="Security", description="Hardcoded secret",
                        commit_status="Modified")
review = SimpleNamespace(files_count=1, issues_count=1, critical_issues=1,
                         high_issues=0, medium_issues=0, low_issues=0,
                         issues=[issue])

state = ReportsWidgetState()
state.set_review(review)
state.selected_format = ReportFormat.MARKDOWN
print(state.generate_report())
```

`generate_report()` returns `None` and changes nothing when no review has
been set. Otherwise it returns the report text, keeps a copy in
`generated_report` and sets `view_mode` to `ViewMode.REPORT`. Call
`back_to_selection()` to return to `ViewMode.SELECTION`.

## What it does not do

The package does not:

- read git repositories
- analyse source code or produce reviews
- draw anything to the terminal
- handle keyboard or mouse input
- write exported reports to disk

It provides no command-line program. A front end supplies the review and
draws the screens from these states.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```