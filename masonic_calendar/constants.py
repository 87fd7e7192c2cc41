"""Shared constants for the masonic calendar."""

# ICS identity
PRODID = "-//Masonic Calendar//EN"
UID_DOMAIN = "masoniccalendar.com"

# Default export naming
ICS_FILENAME_PATTERN = "masonic-calendar-{year}.ics"

# Date range supported by datetime.date
MIN_YEAR = 1
MAX_YEAR = 9999

# Times (24h wall clock)
MEETING_TIME = "16:30"
INSTALLATION_TIME = "16:00"
EVENING_TIME = "19:30"
LOI_AGM_TIME = "20:00"
ICS_DEFAULT_TIME = "09:00"
ICS_EVENT_DURATION_HOURS = 2

# Lodge of Instruction degree rotation
DEGREES = ("1st Degree", "2nd Degree", "3rd Degree")

# Summer recess: Mondays in August from the 3rd to the 31st
RECESS_MONTH = 8
RECESS_FIRST_DAY = 3
RECESS_LAST_DAY = 31
RECESS_LABEL = "Centre Closed"
RECESS_DESCRIPTION = "The Masonic Centre is closed for the summer recess."

BANK_HOLIDAY_DESCRIPTION = "National Bank Holiday"
