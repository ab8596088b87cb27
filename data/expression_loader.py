"""表达式批量加载和结果保存模块"""
import pandas as pd
import logging

from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    加载表达式列表

    Parameters:
    - file_path: CSV文件（取 expression_column 列）或纯文本文件（每行一个表达式）
    - expression_column: CSV中的表达式列名称, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - expressions (pd.Series，空行已去除)
    """
    expression_column = expression_column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    if file_path.endswith('.csv'):
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        # 确保表达式列存在
        if expression_column not in dataset.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in dataset.")
        expressions = dataset[expression_column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        expressions = pd.Series(lines, dtype=object, name=expression_column)

    expressions = expressions[expressions.str.strip() != ''].reset_index(drop=True)
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def check_failed_rows(results):
    """
    检查批量结果中的失败行

    Parameters:
    - results: ExpressionEvaluator.evaluate_many 返回的DataFrame

    Returns:
    - 每种错误类别的数量（pd.Series）
    """
    error_counts = results['error'].value_counts()
    if not error_counts.empty:
        logger.warning('Failed expressions by error kind:')
        logger.warning(error_counts)
    else:
        logger.info('All expressions evaluated successfully.')
    return error_counts


def save_results(results, output_path=None):
    """保存批量结果为CSV"""
    output_path = output_path or BATCH_CONFIG['output_path']
    logger.info(f"Saving results to {output_path}")
    results.rename(columns={
        'expression': BATCH_CONFIG['expression_column'],
        'result': BATCH_CONFIG['result_column'],
        'error': BATCH_CONFIG['error_column'],
    }).to_csv(output_path, index=False)
    return output_path
