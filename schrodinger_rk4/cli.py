"""
Schrödinger RK4 — pacote de onda livre ou contra uma barreira
=============================================================
Integra a equação de Schrödinger dependente do tempo com RK4 de passo fixo
sobre uma grade de diferenças finitas.

Uso:
    schrodinger-rk4                       # 1D interativo
    schrodinger-rk4 --dim 2               # pacote de onda 2D (só o estado inicial)
    schrodinger-rk4 --no-visual --steps 200
    schrodinger-rk4 --method matrix --potential barrier
    schrodinger-rk4 --save rk4.mp4
"""

import argparse
import logging
import time
from dataclasses import replace

from .config import METHODS, Simulation2DConfig, SimulationConfig
from .potentials import QuadraticWell, RectangularBarrier, ZeroPotential
from .stepper import SPEED_RANGE, Stepper
from .wave import build_initial_wave_2d, total_probability, total_probability_2d

# ── Barreira / poço ──────────────────────────────────────
BARRIER = RectangularBarrier(height=60.0, left=2.0, right=2.5)
WELL    = QuadraticWell(strength=20.0)

POTENTIALS = {
    "none": ZeroPotential(),
    "barrier": BARRIER,
    "well": WELL,
}

SAVE_FRAMES = 300


def build_parser():
    parser = argparse.ArgumentParser(description="Schrödinger 1D/2D — RK4")
    parser.add_argument("--dim", type=int, default=1, choices=(1, 2, 3),
                        help="dimensões espaciais (3 não implementado)")
    parser.add_argument("--no-visual", action="store_true", help="sem animação")
    parser.add_argument("--method", choices=METHODS, default="stencil",
                        help="derivada por estêncil O(n) ou matriz O(n²)")
    parser.add_argument("--potential", choices=sorted(POTENTIALS), default="none")
    parser.add_argument("--steps", type=int, default=20,
                        help="passos RK4 sem visualização")
    parser.add_argument("--speed", type=int, default=1,
                        help="passos RK4 por quadro")
    parser.add_argument("--save", metavar="PATH", help="salva animação / imagem")
    parser.add_argument("-v", "--verbose", action="store_true", help="log de depuração")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.dim == 3:
        parser.error("--dim 3: simulação 3D não implementada")
    if args.steps < 0:
        parser.error("--steps deve ser >= 0")
    if not SPEED_RANGE[0] <= args.speed <= SPEED_RANGE[1]:
        parser.error(f"--speed deve estar em {SPEED_RANGE[0]}..{SPEED_RANGE[1]}")
    return args


def run_1d(args):
    config = replace(SimulationConfig(), method=args.method)
    potential = POTENTIALS[args.potential]

    print(f"Grade {config.size} pontos  |  dx = {config.dx}  |  dt = {config.dt}")
    print(f"Método: {config.method}  |  potencial: {args.potential}")

    stepper = Stepper(config, potential)
    stepper.speed = args.speed
    norm0 = total_probability(stepper.psi, config.x_min, config.x_max)
    print(f"Norma inicial: {norm0:.6f}")

    if args.no_visual:
        t0 = time.perf_counter()
        stepper.step(args.steps)
        elapsed = time.perf_counter() - t0
        norm = total_probability(stepper.psi, config.x_min, config.x_max)
        print(f"{args.steps} passos em {elapsed:.2f}s  |  t = {stepper.time:.4f}")
        print(f"Norma final: {norm:.6f}  (desvio: {abs(1 - norm):.2e})")
        return stepper

    from .visualize import animate
    animate(stepper, SAVE_FRAMES if args.save else None, args.save)
    return stepper


def run_2d(args):
    config = Simulation2DConfig()
    x, z, psi = build_initial_wave_2d(config)
    print(f"Grade {len(x)}×{len(z)}  |  dl = {config.dl}")

    norm = total_probability_2d(psi, config.x_min, config.x_max)
    print(f"Norma: {norm:.6f}")

    if not args.no_visual:
        from .visualize import show_2d
        show_2d(x, z, psi, args.save)
    return x, z, psi


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    if args.dim == 1:
        run_1d(args)
    else:
        run_2d(args)
    print("Concluído!")


if __name__ == "__main__":
    main()
