# Stack N identical stages vertically

import logging

from .model import Rail, StackedAssembly, StackedStage, StageGeometry

logger = logging.getLogger(__name__)


def build_stack(stage: StageGeometry, stage_count: int) -> StackedAssembly:
    """
    Replicate one solved stage ``stage_count`` times.

    Every stage opens to the same angle, so only y changes with the stage
    index: stage i (0-based) is shifted by i*h. The base rail stays at y = 0
    and the top rail is drawn at the total height, both centred with their
    own lengths. ``stage_count`` is not range-checked here.
    """
    stages = []
    for i in range(stage_count):
        dy = i * stage.h
        stages.append(StackedStage(
            index=i + 1,
            A=stage.A.translated(dy=dy),
            B=stage.B.translated(dy=dy),
            C=stage.C.translated(dy=dy),
            D=stage.D.translated(dy=dy),
            h=stage.h,
            s=stage.s,
        ))

    total_height = stage_count * stage.h
    logger.debug("stacked %d stage(s), total height %.6g", stage_count, total_height)

    return StackedAssembly(
        stages=tuple(stages),
        total_height=total_height,
        base_rail=Rail(stage.base_span, 0.0),
        top_rail=Rail(stage.top_span, total_height),
    )
