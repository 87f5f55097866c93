"""Online statistics package."""

from online_portfolio_analytics.stats.base import OnlineStatistic  # noqa: F401
from online_portfolio_analytics.stats.drawdowns import (  # noqa: F401
    ArithmeticDrawDowns,
    CumulativeReturn,
    DrawDowns,
    drawdown,
)
from online_portfolio_analytics.stats.mean import (  # noqa: F401
    ArithmeticMeanReturn,
    GeometricMeanReturn,
    mean_return,
)
from online_portfolio_analytics.stats.moments import AssetReturnMoments, StdDev  # noqa: F401
from online_portfolio_analytics.stats.product import RunningProduct  # noqa: F401
from online_portfolio_analytics.stats.ratios import (  # noqa: F401
    DownsideDeviation,
    Sharpe,
    Sortino,
)
from online_portfolio_analytics.stats.returns import (  # noqa: F401
    AssetReturn,
    LogAssetReturn,
    SimpleAssetReturn,
    asset_return,
)
from online_portfolio_analytics.stats.suite import PerformanceSuite  # noqa: F401
