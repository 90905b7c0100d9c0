import argparse
import logging

from tutortime.config import DEFAULT_CONFIG, load_config
from tutortime.io_utils import load_survey_rows, save_grid_csv, save_tutors_csv
from tutortime.grid.layout import generate_all_shift_regions
from tutortime.grid.frame import build_grid_frame, tutors_frame
from tutortime.availability.parser import parse_all_respondents
from tutortime.evaluation import summary


def main():
    p = argparse.ArgumentParser(description="TutorTime – Schedule Helper: shift grid & tutor availability")
    # Input
    p.add_argument('--survey', type=str, required=True, help='Survey responses CSV (timestamp, B-F profile, G-Q hours)')
    p.add_argument('--first_row', type=int, default=2, help='Sheet row of the first response')
    p.add_argument('--config', type=str, default=None, help='Optional JSON overriding grid dimensions')

    # Output
    p.add_argument('--out_grid', type=str, default='outputs/grid.csv')
    p.add_argument('--out_tutors', type=str, default='outputs/tutors.csv')
    p.add_argument('--log_level', type=str, default='WARNING',
                   choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = p.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else DEFAULT_CONFIG
        rows = load_survey_rows(args.survey, first_row=args.first_row)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Error: {e}")

    # === Grid ===
    regions = generate_all_shift_regions(config)
    grid = build_grid_frame(config)

    # === Availability ===
    tutors = parse_all_respondents(rows, first_row=args.first_row)

    print(summary(regions, tutors, config))

    save_grid_csv(args.out_grid, grid)
    save_tutors_csv(args.out_tutors, tutors_frame(tutors))
    print(f"Saved: {args.out_grid}, {args.out_tutors}")


if __name__ == '__main__':
    main()
