"""主程序入口 - 单个表达式、批量文件或交互式会话"""
import argparse
import logging
import sys

from config.config import EVALUATOR_CONFIG, BATCH_CONFIG, validate_config
from core import EvalError
from calc import ExpressionEvaluator, CalculatorSession, SCIENTIFIC_FUNCTIONS
from data.expression_loader import load_expressions, check_failed_rows, save_results
from utils.formatting import format_number

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MEMORY_COMMANDS = {
    ':mc': 'memory_clear',
    ':mr': 'memory_recall',
    ':m+': 'memory_add',
    ':m-': 'memory_subtract',
    ':ms': 'memory_store',
}


def run_single(expression, degrees):
    evaluator = ExpressionEvaluator(degrees=degrees)
    try:
        result = evaluator.evaluate(expression)
    except EvalError as e:
        logger.error(f"{e.kind.value}: {e}")
        return 1
    print(format_number(result))
    return 0


def run_batch(args, degrees):
    logger.info("=== Batch evaluation ===")
    expressions = load_expressions(args.data_path, args.expression_column)

    evaluator = ExpressionEvaluator(degrees=degrees)
    results = evaluator.evaluate_many(expressions)
    check_failed_rows(results)

    if args.save_results:
        save_results(results, args.output_path)
    else:
        for _, row in results.iterrows():
            shown = row['error'] if isinstance(row['error'], str) else format_number(row['result'])
            print(f"{row['expression']} = {shown}")

    logger.info(f"Cache: {evaluator.cache_info()}")
    return 0


def handle_command(session, line):
    """处理交互式命令，返回要显示的文本"""
    if line == ':deg':
        session.set_degrees()
        return 'DEG'
    if line == ':rad':
        session.set_radians()
        return 'RAD'
    if line == ':history':
        return '\n'.join(session.history) or 'Ready to calculate'
    if line in MEMORY_COMMANDS:
        value = getattr(session, MEMORY_COMMANDS[line])()
        if line == ':mr' and value is None:
            return 'Memory is empty'
        return f"M: {format_number(session.memory)}"
    if line in (':pi', ':e'):
        return format_number(session.insert_constant(line[1:]))
    if line == ':rand':
        return format_number(session.random())
    if line[1:] in SCIENTIFIC_FUNCTIONS:
        return format_number(session.apply(line[1:]))
    raise ValueError(f"Unknown command: {line}")


def run_interactive(degrees):
    session = CalculatorSession(degrees=degrees)
    print("Enter an expression, a :command or 'quit'")
    while True:
        try:
            line = input(f"[{'DEG' if session.degrees else 'RAD'}] > ").strip()
        except EOFError:
            break
        if line in ('quit', 'exit'):
            break
        if not line:
            continue
        try:
            if line.startswith(':'):
                print(handle_command(session, line))
            else:
                result = session.calculate(line)
                if result is not None:
                    print(f"= {format_number(result)}")
        except EvalError as e:
            print(f"Error ({e.kind.value}): {e}")
        except ValueError as e:
            print(f"Error: {e}")
    return 0


def main(args):
    validate_config()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    degrees = not args.radians

    if args.interactive:
        return run_interactive(degrees)
    if args.data_path:
        return run_batch(args, degrees)
    if args.expression is not None:
        return run_single(args.expression, degrees)

    logger.error("Nothing to evaluate: pass an expression, --data_path or --interactive")
    return 2


def build_parser():
    parser = argparse.ArgumentParser(description="BODMAS expression calculator")

    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="Expression to evaluate, e.g. '2(3+4)' or 'sin(30)+50%%'"
    )
    parser.add_argument(
        "--radians",
        action="store_true",
        default=not EVALUATOR_CONFIG['default_degrees'],
        help="Interpret trigonometric functions in radians (default: degrees)"
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="Path to a CSV or text file of expressions to evaluate in batch"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Name of the expression column in a CSV file"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the batch results to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG['output_path'],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start an interactive calculator session"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging of the evaluation pipeline"
    )
    return parser


if __name__ == "__main__":
    sys.exit(main(build_parser().parse_args()))
