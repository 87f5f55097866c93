"""Portfolio and asset performance statistics computed with online algorithms."""

from online_portfolio_analytics.errors import (  # noqa: F401
    AnalyticsError,
    DegenerateDenominatorError,
    InvalidInputError,
    UndefinedValueError,
)
from online_portfolio_analytics.models.enums import (  # noqa: F401
    DrawDownMethod,
    MeanMethod,
    ReturnMethod,
    StatisticState,
)
from online_portfolio_analytics.models.types import MomentsValue, PerformanceSnapshot  # noqa: F401
from online_portfolio_analytics.stats import (  # noqa: F401
    ArithmeticDrawDowns,
    ArithmeticMeanReturn,
    AssetReturn,
    AssetReturnMoments,
    CumulativeReturn,
    DownsideDeviation,
    DrawDowns,
    GeometricMeanReturn,
    LogAssetReturn,
    OnlineStatistic,
    PerformanceSuite,
    RunningProduct,
    Sharpe,
    SimpleAssetReturn,
    Sortino,
    StdDev,
    asset_return,
    drawdown,
    mean_return,
)
