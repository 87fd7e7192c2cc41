from dataclasses import asdict
from datetime import date, datetime

from flask import Flask, Response, jsonify, request

from .calendar_generator import generate, validate_year
from .calendar_query import CalendarQuery, LodgeFilter, find_next_event
from .config import CalendarConfig
from .exceptions import InvalidYearError
from .output.ics_writer import to_ics


def _event_json(event):
    return event.model_dump(mode="json", exclude_none=True)


def create_app(config: CalendarConfig | None = None):
    app = Flask(__name__)
    config = config or CalendarConfig.from_env()

    @app.errorhandler(InvalidYearError)
    def invalid_year(error):
        return (str(error), 400)

    @app.route("/calendar/<int:year>.ics", methods=["GET"])
    def get_calendar(year):
        """Serve the ICS download for a year."""
        events = generate(validate_year(year))
        return Response(
            to_ics(events),
            content_type="text/calendar; charset=utf-8",
            headers={
                "Content-Disposition": f"attachment; filename={config.ics_filename(year)}"
            },
        )

    @app.route("/events/<int:year>", methods=["GET"])
    def get_events(year):
        """Events for a year, optionally searched and filtered by lodge."""
        query = CalendarQuery(generate(validate_year(year)))

        lodge = request.args.get("lodge", LodgeFilter.ALL.value).upper()
        if lodge not in LodgeFilter.__members__:
            return (f"Unknown lodge filter: {lodge}", 400)

        events = query.search(request.args.get("q"), lodge=lodge)
        return jsonify(
            {
                "year": year,
                "statistics": asdict(query.statistics(events)),
                "events": [_event_json(e) for e in events],
            }
        )

    @app.route("/next", methods=["GET"])
    def get_next():
        """Next upcoming event from today (or ?date=YYYY-MM-DD)."""
        date_arg = request.args.get("date")
        if date_arg:
            try:
                ref_date = datetime.strptime(date_arg, "%Y-%m-%d").date()
            except ValueError:
                return ("Invalid date, use YYYY-MM-DD", 400)
        else:
            ref_date = date.today()

        event = find_next_event(ref_date)
        if event is None:
            return ("No upcoming event", 404)
        return jsonify(_event_json(event))

    return app
