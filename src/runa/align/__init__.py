from runa.align.alignment import (Align, AlignError, AlignmentLengthError, EmptySequenceError, alignment_cost,
                                  cout_align, mot_gaps, rm_gaps)
from runa.align.distance import dist_naif, dist_dp_full, dist_1, dist_2
from runa.align.solution import sol_1, sol_1_tab, prog_dyn
from runa.align.linear import coupure, align_lettre_mot, sol_2, sol_2_rec
from runa.align.engine import DISTANCES, SOLUTIONS, distance, align
