import argparse
import logging
import sys
from dataclasses import replace

from shiftlog.chump import BREAKDOWN, TOTAL, candidate_players, resolve_chump_game, toggle_player
from shiftlog.config import AppContext, Config
from shiftlog.earnings import compute_earnings, sync_tips_from_breakdown
from shiftlog.exporting import save_shifts
from shiftlog.aggregation import dashboard_stats, shifts_in_week
from shiftlog.models import ChumpGame, Coworker, Differentials, RoleDifferential, TotalAmount
from shiftlog.reporting import print_dashboard, print_roster, print_shift_report, print_shift_summary
from shiftlog.roster import find_user, save_coworker, set_user
from shiftlog.shifts import ValidationError, finalize_shift, new_shift
from shiftlog.store import SheetStore, StoreError
from shiftlog.timeparse import INVALID, parse_time_input
from shiftlog.utils import parse_money, today_local


def _time_arg(value, label, context="start", paired=None):
    parsed = parse_time_input(value, context, paired)
    if parsed == INVALID:
        raise ValidationError(f"Could not read {label} time: {value!r}")
    return parsed


def _money_args(args, shift):
    changes = {}
    for arg_name, field_name in (("tips", "tips"), ("cash", "cash_tips"), ("credit", "credit_tips"),
                                 ("tip_out", "tip_out"), ("rate", "hourly_rate")):
        raw = getattr(args, arg_name)
        if raw is not None:
            changes[field_name] = parse_money(raw)
    if not changes:
        return shift
    shift = shift.updated(**changes)
    if args.cash is not None or args.credit is not None:
        shift = sync_tips_from_breakdown(shift)
    return shift


def _differential_args(args, shift):
    diffs = shift.differentials or Differentials()
    if args.consideration is not None:
        diffs = replace(diffs, consideration=TotalAmount(parse_money(args.consideration) or 0))
    if args.tip_diff is not None:
        diffs = replace(diffs, tip=TotalAmount(parse_money(args.tip_diff) or 0))
    if args.role_hourly is not None or args.role_flat is not None:
        role = RoleDifferential(
            hourly_bonus=parse_money(args.role_hourly) if args.role_hourly is not None else diffs.role.hourly_bonus,
            flat_bonus=parse_money(args.role_flat) if args.role_flat is not None else diffs.role.flat_bonus,
        )
        diffs = replace(diffs, role=role)
    if args.overtime is not None:
        diffs = replace(diffs, overtime=parse_money(args.overtime) or 0)
    return shift.updated(differentials=diffs)


def _chump_args(args, shift, context):
    chump_flags = (args.chump_pot, args.chump_coins, args.chump_cash, args.chump_winner, args.chump_player)
    if all(flag is None for flag in chump_flags):
        return shift, None
    game = shift.chump_game or ChumpGame()
    for name in args.chump_player or []:
        game = toggle_player(game, name, context.user_name)
    # None: infer from whether coins/cash are stored
    mode = None
    if args.chump_coins is not None or args.chump_cash is not None:
        mode = BREAKDOWN
        game = replace(
            game,
            coins=parse_money(args.chump_coins) if args.chump_coins is not None else game.coins,
            cash=parse_money(args.chump_cash) if args.chump_cash is not None else game.cash,
        )
    if args.chump_pot is not None:
        # a typed total replaces any coins/cash breakdown
        mode = TOTAL
        game = replace(game, pot=parse_money(args.chump_pot) or 0, coins=None, cash=None)
    if args.chump_winner:
        game = replace(game, winner_name=args.chump_winner)
    return shift.updated(chump_game=game), mode


def cmd_add(args, store, context, coworkers):
    date_str = args.date or today_local(context.local_tz)
    existing = store.get_shift(date_str)

    start = _time_arg(args.start, "start") if args.start else (existing.start_time if existing else None)
    end = _time_arg(args.end, "end", "end", start) if args.end else (existing.end_time if existing else None)

    if existing is None:
        shift = new_shift(date_str, start, end, context, find_user(coworkers))
    else:
        shift = existing.updated(start_time=start, end_time=end)

    if args.wage_start:
        shift = shift.updated(wage_start_time=_time_arg(args.wage_start, "wage start"))
    if args.wage_end:
        shift = shift.updated(wage_end_time=_time_arg(args.wage_end, "wage end", "end", shift.effective_wage_start))
    if args.note is not None:
        shift = shift.updated(notes=args.note)

    shift = _money_args(args, shift)
    shift = _differential_args(args, shift)
    shift, chump_mode = _chump_args(args, shift, context)

    final = finalize_shift(shift, context, chump_mode)
    store.save_shift(final)

    print(f"✅ Saved shift {final.id}")
    summary = compute_earnings(final, resolve_chump_game(final.chump_game, chump_mode).payout_to_user)
    print_shift_summary(final, summary)
    if final.team_on_shift:
        print(f"Chump players available: {', '.join(candidate_players(final.team_on_shift, context.user_name))}")
    return 0


def cmd_show(args, store, context, coworkers):
    shift = store.get_shift(args.date)
    if shift is None:
        print(f"No shift on {args.date}", file=sys.stderr)
        return 1
    summary = compute_earnings(shift, resolve_chump_game(shift.chump_game).payout_to_user)
    print_shift_summary(shift, summary)
    return 0


def cmd_list(args, store, context, coworkers):
    shifts = store.get_shifts()
    title = "Shift Report"
    if args.week is not None:
        try:
            shifts = shifts_in_week(shifts, args.week or None, context.local_tz)
        except ValueError:
            raise ValidationError(f"Could not read week date: {args.week!r} (use YYYY-MM-DD)") from None
        title = f"Shift Report • week of {args.week or today_local(context.local_tz)}"
    print_shift_report(shifts, title=title)
    return 0


def cmd_stats(args, store, context, coworkers):
    print_dashboard(dashboard_stats(store.get_shifts()))
    return 0


def cmd_delete(args, store, context, coworkers):
    store.delete_shift(args.date)
    print(f"🗑️ Deleted shift {args.date}")
    return 0


def cmd_coworkers(args, store, context, coworkers):
    if args.add:
        cw_id, name, first, last, positions = args.add
        coworker = Coworker(
            id=cw_id,
            name=name,
            first_name=first,
            last_name=last,
            positions=[p.strip() for p in positions.split(",") if p.strip()],
            manager=args.manager,
        )
        save_coworker(store, coworker, is_new=True)
        print(f"✅ Added {name}")
    if args.me:
        set_user(store, args.me)
        print(f"⭐ {args.me} is now you")
    print_roster(store.get_coworkers())
    return 0


def cmd_export(args, store, context, coworkers):
    save_shifts(store.get_shifts(), args.out_dir)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Bartender shift and tip tracker")
    parser.add_argument("--store", help="Workbook file (default: SHIFTLOG_STORE or shiftlog.json)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add or update the shift on a date")
    add.add_argument("--date", help="Shift date (YYYY-MM-DD), default today")
    add.add_argument("--start", help="Start time, e.g. 5p, 1730, 5:30")
    add.add_argument("--end", help="End time, e.g. 2, 1:30a")
    add.add_argument("--tips", help="Total tips")
    add.add_argument("--cash", help="Cash tips")
    add.add_argument("--credit", help="Credit card tips")
    add.add_argument("--tip-out", dest="tip_out", help="Tipped out to support staff")
    add.add_argument("--rate", help="Hourly rate")
    add.add_argument("--wage-start", dest="wage_start", help="Paid wage window start")
    add.add_argument("--wage-end", dest="wage_end", help="Paid wage window end")
    add.add_argument("--consideration", help="Consideration total (can be negative)")
    add.add_argument("--tip-diff", dest="tip_diff", help="Tip differential total")
    add.add_argument("--role-hourly", dest="role_hourly", help="Role bonus per paid hour")
    add.add_argument("--role-flat", dest="role_flat", help="Flat role bonus")
    add.add_argument("--overtime", help="Overtime pay")
    add.add_argument("--chump-pot", dest="chump_pot", help="Chump pot total")
    add.add_argument("--chump-coins", dest="chump_coins", help="Chump pot coins")
    add.add_argument("--chump-cash", dest="chump_cash", help="Chump pot cash")
    add.add_argument("--chump-player", dest="chump_player", action="append", help="Toggle a chump player")
    add.add_argument("--chump-winner", dest="chump_winner", help="Who won the chump game")
    add.add_argument("--note", help="Shift notes")
    add.set_defaults(func=cmd_add)

    show = sub.add_parser("show", help="Earnings breakdown for one shift")
    show.add_argument("date")
    show.set_defaults(func=cmd_show)

    lst = sub.add_parser("list", help="List shifts")
    lst.add_argument("--week", nargs="?", const="", help="Only the week containing this date (default this week)")
    lst.set_defaults(func=cmd_list)

    stats = sub.add_parser("stats", help="Dashboard totals")
    stats.set_defaults(func=cmd_stats)

    delete = sub.add_parser("delete", help="Delete the shift on a date")
    delete.add_argument("date")
    delete.set_defaults(func=cmd_delete)

    cw = sub.add_parser("coworkers", help="List or edit the coworker roster")
    cw.add_argument("--add", nargs=5, metavar=("ID", "NAME", "FIRST", "LAST", "POSITIONS"))
    cw.add_argument("--manager", action="store_true", help="With --add: mark as manager")
    cw.add_argument("--me", metavar="ID", help="Mark this coworker as you")
    cw.set_defaults(func=cmd_coworkers)

    export = sub.add_parser("export", help="Write shifts to JSON and Excel")
    export.add_argument("--out-dir", dest="out_dir", default=".")
    export.set_defaults(func=cmd_export)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config.from_env()
    store = SheetStore(args.store or config.STORE_PATH)

    try:
        coworkers = store.get_coworkers()
        context = AppContext.build(config, coworkers)
        return args.func(args, store, context, coworkers)
    except (ValidationError, StoreError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
