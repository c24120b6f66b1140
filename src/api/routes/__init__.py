from api.routes.heatmap import HeatmapController
from api.routes.importer import ImportController
from api.routes.problem import ProblemController

__all__ = ["HeatmapController", "ImportController", "ProblemController"]
