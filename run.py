"""
Main Entry Point for the glmath scene inspector

This script builds the matrices a WebGL draw call would upload:
1. Load scene configuration from YAML
2. Build the camera (projection + view)
3. Build the model matrix (translate * rotate * scale)
4. Print the matrices in upload (column-major) order
5. Project the scene points to screen coordinates

Usage:
    python run.py --config configs/scene.yaml
    python run.py --config configs/scene.yaml --projection ortho --eye 0 0 10
"""

import argparse
import sys
from pathlib import Path
from omegaconf import DictConfig, OmegaConf
import numpy as np

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

# Project imports
from glmath import (
    Camera,
    Matrix4,
    ModelTransform,
    make_camera_from_config,
    project_points_to_screen,
)


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Inspect camera / model matrices for a scene",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --config configs/scene.yaml
  python run.py --config configs/scene.yaml --projection ortho
  python run.py --config configs/scene.yaml --eye 3 3 3 --html
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="configs/scene.yaml",
        help="Path to YAML configuration file"
    )

    parser.add_argument(
        "--projection",
        type=str,
        choices=["frustum", "ortho"],
        default=None,
        help="Override projection type"
    )

    parser.add_argument(
        "--eye",
        type=float,
        nargs=3,
        default=None,
        metavar=("X", "Y", "Z"),
        help="Override camera position"
    )

    parser.add_argument(
        "--html",
        action="store_true",
        help="Print matrices as HTML tables"
    )

    return parser.parse_args(argv)


def load_config(config_path: str) -> OmegaConf:
    """
    Load and validate YAML configuration

    Args:
        config_path: Path to YAML config file

    Returns:
        OmegaConf configuration object
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    # Validate required fields
    required_sections = ["camera"]

    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    for section in ["camera", "model", "viewport"]:
        value = config.get(section)
        if section in required_sections and value is None:
            raise ValueError(f"Config section '{section}' is empty")
        if value is not None and not isinstance(value, DictConfig):
            raise ValueError(f"Config section '{section}' must be a mapping")

    for section in ["projection", "view"]:
        value = config.camera.get(section)
        if value is not None and not isinstance(value, DictConfig):
            raise ValueError(f"Config section 'camera.{section}' must be a mapping")

    print(f"[Config] Loaded configuration from: {config_path}")
    print(f"  - Projection: {(config.camera.get('projection') or {}).get('type', 'frustum')}")
    print(f"  - View: {(config.camera.get('view') or {}).get('type', 'lookat')}")
    print(f"  - Points: {len(config.get('points', []) or [])}")

    return config


def apply_cli_overrides(config: OmegaConf, args) -> OmegaConf:
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    if args.projection is not None:
        OmegaConf.update(config, "camera.projection.type", args.projection, force_add=True)
        print(f"[Config] Override projection: {args.projection}")

    if args.eye is not None:
        OmegaConf.update(config, "camera.view.eye", list(args.eye), force_add=True)
        print(f"[Config] Override eye: {args.eye}")

    return config


# ============================================================================
# Scene
# ============================================================================

def setup_camera(config: OmegaConf) -> Camera:
    """Build the camera described by the 'camera' section"""
    return make_camera_from_config(config.camera)


def setup_model(config: OmegaConf) -> Matrix4:
    """Build the model matrix described by the optional 'model' section"""
    model_cfg = config.get("model")
    if model_cfg is None:
        return Matrix4()
    return ModelTransform.from_dict(model_cfg).model()


def format_matrix(name: str, matrix: Matrix4, html: bool = False) -> str:
    """Render a matrix for the console (rows) or as an HTML table"""
    if html:
        return f"<h3>{name}</h3>\n{matrix.as_html()}"

    lines = [f"[{name}]"]
    for row in matrix.rows():
        lines.append("  " + " ".join(f"{v:10.4f}" for v in row))
    lines.append("  upload: " + ", ".join(f"{v:.4f}" for v in matrix.data()))
    return "\n".join(lines)


def report(config: OmegaConf, camera: Camera, model: Matrix4, html: bool = False):
    """Print matrices and projected points"""
    print(f"\n{'='*60}")
    print("Matrices")
    print(f"{'='*60}")
    print(format_matrix("Projection", camera.get_projection(), html))
    print(format_matrix("View", camera.get_view(), html))
    print(format_matrix("Model", model, html))

    points = config.get("points")
    if not points:
        return

    viewport = config.get("viewport") or {}
    width = int(viewport.get("width", 800))
    height = int(viewport.get("height", 600))

    mvp = camera.view_projection().multiply(model)
    xyz = np.asarray(OmegaConf.to_container(points), dtype=np.float64)
    means2d, valid = project_points_to_screen(xyz, mvp, width, height)

    print(f"\n{'='*60}")
    print(f"Screen projection ({width}x{height})")
    print(f"{'='*60}")
    for p, uv, ok in zip(xyz, means2d, valid):
        status = f"({uv[0]:8.2f}, {uv[1]:8.2f})" if ok else "clipped"
        print(f"  ({p[0]:6.2f}, {p[1]:6.2f}, {p[2]:6.2f}) -> {status}")


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config = apply_cli_overrides(config, args)

        camera = setup_camera(config)
        model = setup_model(config)
        report(config, camera, model, html=args.html)
    except (FileNotFoundError, ValueError) as e:
        print(f"[Error] {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
