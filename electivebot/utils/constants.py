"""Constants and default values."""

# Replies
COURSE_ADDED = "Course in your list"
COURSE_REMOVED = "Course {title} removed from your list"
NO_CATALOG = "The list of elective courses is not yet available"
CATALOG_HEADER = "List of available elective courses"
NO_COURSES_SELECTED = "No courses selected. Please choose something!!)"
MY_COURSES_HEADER = "Your list of selected Elective courses"
NOTHING_TO_SHOW = "Nothing to show :("
REMINDER_SET = "Ok, I will remind you."
REMINDER_REMOVED = "Reminder {title} removed from your list"
NO_REMINDERS = "The list of reminders is not yet available"
REMINDERS_HEADER = "List of reminders"
REMINDER_PREFIX = "Reminder: "
REMINDER_FIRED = "already sent"
NO_WEEK_LECTURES = "You don't have lectures on this week"
WEEK_HEADER = "List of courses"
TODO_ADDED = "ToDo in your list"
TODO_REMOVED = "ToDo {title} removed from your list"
NO_TODO = "There is nothing todo"
NO_TODO_IN = "There is nothing todo in {title}"

# Course action keyboard
BTN_SET_REMINDER = "Set reminder"
BTN_BACK = "⬅ Back to course list"
BTN_SHOW_REMINDERS = "Show all reminders"
BTN_TODO_IN = "ToDo in {title}"
BTN_REMOVE_COURSE = "Remove from my list"

# Default timezone
DEFAULT_TIMEZONE = "UTC"

# Reminder sweep cadence in seconds
DEFAULT_SWEEP_INTERVAL = 60
