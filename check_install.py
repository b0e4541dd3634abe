#!/usr/bin/env python3
"""
Installation Verification Script for yearwall

This script checks that all required dependencies are properly installed
and provides diagnostic information for troubleshooting.
"""

import sys
from datetime import datetime


def check_python_version():
    """Check if Python version meets requirements."""
    version = sys.version_info
    required = (3, 8)

    print(f"Python version: {version.major}.{version.minor}.{version.micro}")

    if version >= required:
        print("✓ Python version OK")
        return True
    else:
        print(f"✗ Python {required[0]}.{required[1]}+ required")
        return False


def check_module(module_name, import_name=None, optional=False):
    """Check if a Python module can be imported."""
    if import_name is None:
        import_name = module_name

    try:
        __import__(import_name)
        status = "✓" if not optional else "✓ (optional)"
        print(f"{status} {module_name}")
        return True
    except ImportError as e:
        status = "✗" if not optional else "- (optional)"
        print(f"{status} {module_name}: {e}")
        return not optional  # Return True if optional, False if required


def check_pil_features():
    """Check PIL/Pillow capabilities."""
    try:
        from PIL import Image, ImageDraw, features

        test_img = Image.new("RGBA", (100, 50), (255, 255, 255, 255))
        draw = ImageDraw.Draw(test_img)
        draw.rounded_rectangle((10, 10, 40, 40), radius=6, fill=(0, 0, 0, 255))

        print("✓ PIL/Pillow image creation works")

        if features.check("freetype2"):
            print("✓ FreeType support available")
        else:
            print("! FreeType missing, text will use the bitmap default font")

        return True
    except Exception as e:
        print(f"✗ PIL/Pillow error: {e}")
        return False


def check_fonts():
    """Report which fonts the renderer resolves (non-critical)."""
    from PIL import ImageFont

    from yearwall.image_renderer import WallpaperImageRenderer

    renderer = WallpaperImageRenderer(10, 10)
    for bold in (False, True):
        font = renderer._get_font(24, bold)
        label = "Bold" if bold else "Regular"
        if isinstance(font, ImageFont.FreeTypeFont):
            print(f"✓ {label} font: {font.path if isinstance(font.path, str) else 'built-in'}")
        else:
            print(f"! {label} font: Pillow bitmap default")
    return True


def check_http_server():
    """Test if HTTP server can be imported."""
    try:
        import http_server  # noqa: F401

        print("✓ HTTP server module loads")
        return True
    except Exception as e:
        print(f"✗ HTTP server error: {e}")
        return False


def run_functional_test():
    """Render one small wallpaper end to end."""
    print("\nRunning functional test...")

    try:
        from yearwall.params import parse_params
        from yearwall.wallpaper import render_wallpaper

        params = parse_params({"model": "iphone_se", "lang": "en", "style": "squares"})
        image = render_wallpaper(params, datetime(2024, 6, 15, 12, 0))

        if image.size != (750, 1334):
            print(f"✗ Unexpected image size: {image.size}")
            return False

        image.save("test_wallpaper.png")
        print("✓ Functional test passed")
        print("✓ Test image saved (test_wallpaper.png)")
        return True

    except Exception as e:
        print(f"✗ Functional test failed: {e}")
        return False


def main():
    """Main verification function."""
    print("yearwall Installation Verification")
    print("=" * 40)

    checks_passed = 0
    total_checks = 0

    print("\n1. System Requirements:")
    if check_python_version():
        checks_passed += 1
    total_checks += 1

    print("\n2. Required Modules:")
    modules = [
        ("PIL (Pillow)", "PIL"),
        ("python-dotenv", "dotenv"),
        ("yearwall", "yearwall"),
    ]

    for display_name, import_name in modules:
        if check_module(display_name, import_name):
            checks_passed += 1
        total_checks += 1

    print("\n3. Optional Modules:")
    check_module("pytest", "pytest", optional=True)

    print("\n4. Image Processing:")
    if check_pil_features():
        checks_passed += 1
    total_checks += 1

    check_fonts()  # Non-critical

    print("\n5. Module Functionality:")
    if check_http_server():
        checks_passed += 1
    total_checks += 1

    print("\n6. Functional Test:")
    if run_functional_test():
        checks_passed += 1
    total_checks += 1

    print("\n" + "=" * 40)
    print(f"Installation Check Summary: {checks_passed}/{total_checks} passed")

    if checks_passed == total_checks:
        print("✓ Installation is complete and working!")
        print("\nNext steps:")
        print("  • Run 'python http_server.py' to start the server")
        print("  • Open http://localhost:8000/api/wallpaper in your browser")
    else:
        print("! Some issues detected. Please check the output above.")
        print("\nCommon fixes:")
        print("  • Run: pip install -r requirements.txt")
        print("  • Set YEARWALL_FONT_PATH to a TTF font with Cyrillic glyphs")

    return checks_passed == total_checks


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
