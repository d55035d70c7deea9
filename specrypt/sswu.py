"""Simplified SWU maps (for curves with ``A * B == 0``) to BLS12-381.

Each map sends a field element to an isogenous curve with the simplified
Shallue-van de Woestijne-Ulas method. It then carries the point to the
target curve through the 11-isogeny (G1) or the 3-isogeny (G2).

A G1 point is ``(x, y, infinity)`` with Fp coordinates. A G2 point is
``(x, y, infinity)`` with Fp2 coordinates.
"""

from __future__ import annotations

from collections.abc import Sequence

from .bls_field import (
    FP2_ONE,
    FP2_ZERO,
    Fp2,
    P,
    fp2_add,
    fp2_inv,
    fp2_is_square,
    fp2_mul,
    fp2_neg,
    fp2_sgn0,
    fp2_sqrt,
    fp_inv,
    fp_is_square,
    fp_sgn0,
    fp_sqrt,
)

G1Point = tuple[int, int, bool]
G2Point = tuple[Fp2, Fp2, bool]


def _fp(*limbs: str) -> int:
    """Build an Fp element from big-endian 64-bit hexadecimal limbs."""
    return int("".join(limbs), 16) % P


# Isogenous curve E1': y^2 = x^3 + A * x + B
_G1_ISO_A = _fp(
    "00144698a3b8e943", "3d693a02c96d4982", "b0ea985383ee66a8",
    "d8e8981aefd881ac", "98936f8da0e0f97f", "5cf428082d584c1d",
)
_G1_ISO_B = _fp(
    "12e2908d11688030", "018b12e8753eee3b", "2016c1f0f24f4070",
    "a0b9c14fcef35ef5", "5a23215a316ceaa5", "d1cc48e98e172be0",
)
_G1_Z = 11

_G1_XNUM = (
    _fp("11a05f2b1e833340", "b809101dd9981585", "6b303e88a2d7005f",
        "f2627b56cdb4e2c8", "5610c2d5f2e62d6e", "aeac1662734649b7"),
    _fp("17294ed3e943ab2f", "0588bab22147a81c", "7c17e75b2f6a8417",
        "f565e33c70d1e86b", "4838f2a6f318c356", "e834eef1b3cb83bb"),
    _fp("0d54005db97678ec", "1d1048c5d10a9a1b", "ce032473295983e5",
        "6878e501ec68e25c", "958c3e3d2a09729f", "e0179f9dac9edcb0"),
    _fp("1778e7166fcc6db7", "4e0609d307e55412", "d7f5e4656a8dbf25",
        "f1b33289f1b33083", "5336e25ce3107193", "c5b388641d9b6861"),
    _fp("0e99726a3199f443", "6642b4b3e4118e54", "99db995a1257fb3f",
        "086eeb65982fac18", "985a286f301e77c4", "51154ce9ac8895d9"),
    _fp("1630c3250d7313ff", "01d1201bf7a74ab5", "db3cb17dd952799b",
        "9ed3ab9097e68f90", "a0870d2dcae73d19", "cd13c1c66f652983"),
    _fp("0d6ed6553fe44d29", "6a3726c38ae652bf", "b11586264f0f8ce1",
        "9008e218f9c86b2a", "8da25128c1052eca", "ddd7f225a139ed84"),
    _fp("17b81e7701abdbe2", "e8743884d1117e53", "356de5ab275b4db1",
        "a682c62ef0f27533", "39b7c8f8c8f475af", "9ccb5618e3f0c88e"),
    _fp("080d3cf1f9a78fc4", "7b90b33563be990d", "c43b756ce79f5574",
        "a2c596c928c5d1de", "4fa295f296b74e95", "6d71986a8497e317"),
    _fp("169b1f8e1bcfa7c4", "2e0c37515d138f22", "dd2ecb803a0c5c99",
        "676314baf4bb1b7f", "a3190b2edc032779", "7f241067be390c9e"),
    _fp("10321da079ce07e2", "72d8ec09d2565b0d", "fa7dccdde6787f96",
        "d50af36003b14866", "f69b771f8c285dec", "ca67df3f1605fb7b"),
    _fp("06e08c248e260e70", "bd1e962381edee3d", "31d79d7e22c837bc",
        "23c0bf1bc24c6b68", "c24b1b80b64d391f", "a9c8ba2e8ba2d229"),
)

_G1_XDEN = (
    _fp("08ca8d548cff19ae", "18b2e62f4bd3fa6f", "01d5ef4ba35b48ba",
        "9c9588617fc8ac62", "b558d681be343df8", "993cf9fa40d21b1c"),
    _fp("12561a5deb559c43", "48b4711298e53636", "7041e8ca0cf0800c",
        "0126c2588c48bf57", "13daa8846cb026e9", "e5c8276ec82b3bff"),
    _fp("0b2962fe57a3225e", "8137e629bff2991f", "6f89416f5a718cd1",
        "fca64e00b11aceac", "d6a3d0967c94fedc", "fcc239ba5cb83e19"),
    _fp("03425581a58ae2fe", "c83aafef7c40eb54", "5b08243f16b16551",
        "54cca8abc28d6fd0", "4976d5243eecf5c4", "130de8938dc62cd8"),
    _fp("13a8e162022914a8", "0a6f1d5f43e7a07d", "ffdfc759a12062bb",
        "8d6b44e833b306da", "9bd29ba81f35781d", "539d395b3532a21e"),
    _fp("0e7355f8e4e667b9", "55390f7f0506c6e9", "395735e9ce9cad4d",
        "0a43bcef24b8982f", "7400d24bc4228f11", "c02df9a29f6304a5"),
    _fp("0772caacf1693619", "0f3e0c63e0596721", "570f5799af53a189",
        "4e2e073062aede9c", "ea73b3538f0de06c", "ec2574496ee84a3a"),
    _fp("14a7ac2a9d64a8b2", "30b3f5b074cf0199", "6e7f63c21bca68a8",
        "1996e1cdf9822c58", "0fa5b9489d11e2d3", "11f7d99bbdcc5a5e"),
    _fp("0a10ecf6ada54f82", "5e920b3dafc7a3cc", "e07f8d1d7161366b",
        "74100da67f398835", "03826692abba4370", "4776ec3a79a1d641"),
    _fp("095fc13ab9e92ad4", "476d6e3eb3a56680", "f682b4ee96f7d037",
        "76df533978f31c15", "93174e4b4b786500", "2d6384d168ecdd0a"),
)

_G1_YNUM = (
    _fp("090d97c81ba24ee0", "259d1f094980dcfa", "11ad138e48a86952",
        "2b52af6c956543d3", "cd0c7aee9b3ba3c2", "be9845719707bb33"),
    _fp("134996a104ee5811", "d51036d776fb4683", "1223e96c254f383d",
        "0f906343eb67ad34", "d6c56711962fa8bf", "e097e75a2e41c696"),
    _fp("00cc786baa966e66", "f4a384c86a3b4994", "2552e2d658a31ce2",
        "c344be4b91400da7", "d26d521628b00523", "b8dfe240c72de1f6"),
    _fp("01f86376e8981c21", "7898751ad8746757", "d42aa7b90eeb791c",
        "09e4a3ec03251cf9", "de405aba9ec61dec", "a6355c77b0e5f4cb"),
    _fp("08cc03fdefe0ff13", "5caf4fe2a21529c4", "195536fbe3ce50b8",
        "79833fd221351adc", "2ee7f8dc099040a8", "41b6daecf2e8fedb"),
    _fp("16603fca40634b6a", "2211e11db8f0a6a0", "74a7d0d4afadb7bd",
        "76505c3d3ad5544e", "203f6326c95a8072", "99b23ab13633a5f0"),
    _fp("04ab0b9bcfac1bbc", "b2c977d027796b3c", "e75bb8ca2be184cb",
        "5231413c4d634f37", "47a87ac2460f415e", "c961f8855fe9d6f2"),
    _fp("0987c8d5333ab86f", "de9926bd2ca6c674", "170a05bfe3bdd81f",
        "fd038da6c26c8426", "42f64550fedfe935", "a15e4ca31870fb29"),
    _fp("09fc4018bd96684b", "e88c9e221e4da1bb", "8f3abd16679dc26c",
        "1e8b6e6a1f20cabe", "69d65201c78607a3", "60370e577bdba587"),
    _fp("0e1bba7a1186bdb5", "223abde7ada14a23", "c42a0ca7915af6fe",
        "06985e7ed1e4d43b", "9b3f7055dd4eba6f", "2bafaaebca731c30"),
    _fp("19713e47937cd1be", "0dfd0b8f1d43fb93", "cd2fcbcb6caf493f",
        "d1183e416389e610", "31bf3a5cce3fbafc", "e813711ad011c132"),
    _fp("18b46a908f36f6de", "b918c143fed2edcc", "523559b8aaf0c246",
        "2e6bfe7f911f6432", "49d9cdf41b44d606", "ce07c8a4d0074d8e"),
    _fp("0b182cac101b9399", "d155096004f53f44", "7aa7b12a3426b08e",
        "c02710e807b4633f", "06c851c1919211f2", "0d4c04f00b971ef8"),
    _fp("0245a394ad1eca9b", "72fc00ae7be315dc", "757b3b080d4c1580",
        "13e6632d3c40659c", "c6cf90ad1c232a64", "42d9d3f5db980133"),
    _fp("05c129645e44cf11", "02a159f748c4a3fc", "5e673d81d7e86568",
        "d9ab0f5d396a7ce4", "6ba1049b6579afb7", "866b1e715475224b"),
    _fp("15e6be4e990f03ce", "4ea50b3b42df2eb5", "cb181d8f84965a39",
        "57add4fa95af01b2", "b665027efec01c77", "04b456be69c8b604"),
)

_G1_YDEN = (
    _fp("16112c4c3a9c98b2", "52181140fad0eae9", "601a6de578980be6",
        "eec3232b5be72e7a", "07f3688ef60c206d", "01479253b03663c1"),
    _fp("1962d75c2381201e", "1a0cbd6c43c348b8", "85c84ff731c4d59c",
        "a4a10356f453e01f", "78a4260763529e35", "32f6102c2e49a03d"),
    _fp("058df3306640da27", "6faaae7d6e8eb157", "78c4855551ae7f31",
        "0c35a5dd279cd2ec", "a6757cd636f96f89", "1e2538b53dbf67f2"),
    _fp("16b7d288798e5395", "f20d23bf89edb4d1", "d115c5dbddbcd30e",
        "123da489e726af41", "727364f2c28297ad", "a8d26d98445f5416"),
    _fp("0be0e079545f43e4", "b00cc912f8228ddc", "c6d19c9f0f69bbb0",
        "542eda0fc9dec916", "a20b15dc0fd2eded", "da39142311a5001d"),
    _fp("08d9e5297186db2d", "9fb266eaac783182", "b70152c65550d881",
        "c5ecd87b6f0f5a64", "49f38db9dfa9cce2", "02c6477faaf9b7ac"),
    _fp("166007c08a99db2f", "c3ba8734ace9824b", "5eecfdfa8d0cf8ef",
        "5dd365bc400a0051", "d5fa9c01a58b1fb9", "3d1a1399126a775c"),
    _fp("16a3ef08be3ea7ea", "03bcddfabba6ff6e", "e5a4375efa1f4fd7",
        "feb34fd206357132", "b920f5b00801dee4", "60ee415a15812ed9"),
    _fp("1866c8ed336c6123", "1a1be54fd1d74cc4", "f9fb0ce4c6af5920",
        "abc5750c4bf39b48", "52cfe2f7bb924883", "6b233d9d55535d4a"),
    _fp("167a55cda70a6e1c", "ea820597d94a8490", "3216f763e13d87bb",
        "5308592e7ea7d4fb", "c7385ea3d529b35e", "346ef48bb8913f55"),
    _fp("04d2f259eea405bd", "48f010a01ad2911d", "9c6dd039bb61a629",
        "0e591b36e636a5c8", "71a5c29f4f830604", "00f8b49cba8f6aa8"),
    _fp("0accbb67481d033f", "f5852c1e48c50c47", "7f94ff8aefce42d2",
        "8c0f9a88cea79135", "16f968986f7ebbea", "9684b529e2561092"),
    _fp("0ad6b9514c767fe3", "c3613144b45f1496", "543346d98adf0226",
        "7d5ceef9a00d9b86", "93000763e3b90ac1", "1e99b138573345cc"),
    _fp("02660400eb2e4f3b", "628bdd0d53cd76f2", "bf565b94e72927c1",
        "cb748df27942480e", "420517bd8714cc80", "d1fadc1326ed06f7"),
    _fp("0e0fa1d816ddc03e", "6b24255e0d7819c1", "71c40f65e273b853",
        "324efcd6356caa20", "5ca2f570f1349780", "4415473a1d634b8f"),
)

# Isogenous curve E2': y^2 = x^3 + A * x + B over Fp2
_G2_ISO_A: Fp2 = (0, 240)
_G2_ISO_B: Fp2 = (1012, 1012)
_G2_Z: Fp2 = fp2_neg((2, 1))

_G2_XNUM_K_0 = _fp("05c759507e8e333e", "bb5b7a9a47d7ed85", "32c52d39fd3a042a",
                   "88b58423c50ae15d", "5c2638e343d9c71c", "6238aaaaaaaa97d6")
_G2_XNUM_K_1_I = _fp("11560bf17baa99bc", "32126fced787c88f", "984f87adf7ae0c7f",
                     "9a208c6b4f20a418", "1472aaa9cb8d5555", "26a9ffffffffc71a")
_G2_XNUM_K_2_R = _fp("11560bf17baa99bc", "32126fced787c88f", "984f87adf7ae0c7f",
                     "9a208c6b4f20a418", "1472aaa9cb8d5555", "26a9ffffffffc71e")
_G2_XNUM_K_2_I = _fp("08ab05f8bdd54cde", "190937e76bc3e447", "cc27c3d6fbd7063f",
                     "cd104635a790520c", "0a395554e5c6aaaa", "9354ffffffffe38d")
_G2_XNUM_K_3_R = _fp("171d6541fa38ccfa", "ed6dea691f5fb614", "cb14b4e7f4e810aa",
                     "22d6108f142b8575", "7098e38d0f671c71", "88e2aaaaaaaa5ed1")

_G2_XDEN_K_0_I = _fp("1a0111ea397fe69a", "4b1ba7b6434bacd7", "64774b84f38512bf",
                     "6730d2a0f6b0f624", "1eabfffeb153ffff", "b9feffffffffaa63")
_G2_XDEN_K_1_I = _fp("1a0111ea397fe69a", "4b1ba7b6434bacd7", "64774b84f38512bf",
                     "6730d2a0f6b0f624", "1eabfffeb153ffff", "b9feffffffffaa9f")

_G2_YNUM_K_0 = _fp("1530477c7ab4113b", "59a4c18b076d1193", "0f7da5d4a07f649b",
                   "f54439d87d27e500", "fc8c25ebf8c92f68", "12cfc71c71c6d706")
_G2_YNUM_K_1_I = _fp("05c759507e8e333e", "bb5b7a9a47d7ed85", "32c52d39fd3a042a",
                     "88b58423c50ae15d", "5c2638e343d9c71c", "6238aaaaaaaa97be")
_G2_YNUM_K_2_R = _fp("11560bf17baa99bc", "32126fced787c88f", "984f87adf7ae0c7f",
                     "9a208c6b4f20a418", "1472aaa9cb8d5555", "26a9ffffffffc71c")
_G2_YNUM_K_2_I = _fp("08ab05f8bdd54cde", "190937e76bc3e447", "cc27c3d6fbd7063f",
                     "cd104635a790520c", "0a395554e5c6aaaa", "9354ffffffffe38f")
_G2_YNUM_K_3_R = _fp("124c9ad43b6cf79b", "fbf7043de3811ad0", "761b0f37a1e26286",
                     "b0e977c69aa27452", "4e79097a56dc4bd9", "e1b371c71c718b10")

_G2_YDEN_K_0 = _fp("1a0111ea397fe69a", "4b1ba7b6434bacd7", "64774b84f38512bf",
                   "6730d2a0f6b0f624", "1eabfffeb153ffff", "b9feffffffffa8fb")
_G2_YDEN_K_1_I = _fp("1a0111ea397fe69a", "4b1ba7b6434bacd7", "64774b84f38512bf",
                     "6730d2a0f6b0f624", "1eabfffeb153ffff", "b9feffffffffa9d3")
_G2_YDEN_K_2_I = _fp("1a0111ea397fe69a", "4b1ba7b6434bacd7", "64774b84f38512bf",
                     "6730d2a0f6b0f624", "1eabfffeb153ffff", "b9feffffffffaa99")

_G2_XNUM: tuple[Fp2, ...] = (
    (_G2_XNUM_K_0, _G2_XNUM_K_0),
    (0, _G2_XNUM_K_1_I),
    (_G2_XNUM_K_2_R, _G2_XNUM_K_2_I),
    (_G2_XNUM_K_3_R, 0),
)
_G2_XDEN: tuple[Fp2, ...] = (
    (0, _G2_XDEN_K_0_I),
    (12, _G2_XDEN_K_1_I),
)
_G2_YNUM: tuple[Fp2, ...] = (
    (_G2_YNUM_K_0, _G2_YNUM_K_0),
    (0, _G2_YNUM_K_1_I),
    (_G2_YNUM_K_2_R, _G2_YNUM_K_2_I),
    (_G2_YNUM_K_3_R, 0),
)
_G2_YDEN: tuple[Fp2, ...] = (
    (_G2_YDEN_K_0, _G2_YDEN_K_0),
    (0, _G2_YDEN_K_1_I),
    (18, _G2_YDEN_K_2_I),
)


def _fp_poly(coeffs: Sequence[int], x: int, monic: bool) -> int:
    """Evaluate ``sum(k_i * x**i)``, adding ``x**len(coeffs)`` when monic."""
    acc = 0
    power = 1
    for k in coeffs:
        acc = (acc + power * k) % P
        power = power * x % P
    if monic:
        acc = (acc + power) % P
    return acc


def _fp2_poly(coeffs: Sequence[Fp2], x: Fp2, monic: bool) -> Fp2:
    """Evaluate a polynomial over Fp2, adding the leading ``x**n`` when monic."""
    acc = FP2_ZERO
    power = FP2_ONE
    for k in coeffs:
        acc = fp2_add(acc, fp2_mul(power, k))
        power = fp2_mul(power, x)
    if monic:
        acc = fp2_add(acc, power)
    return acc


def g1_simple_swu_iso(u: int) -> tuple[int, int]:
    """Map an Fp element to a point ``(x, y)`` of the curve isogenous to G1."""
    u %= P
    z, a, b = _G1_Z, _G1_ISO_A, _G1_ISO_B
    u2 = u * u % P
    tv1 = fp_inv(z * z * u2 * u2 + z * u2)
    if tv1 == 0:
        x1 = b * fp_inv(z * a) % P
    else:
        x1 = (-b) * fp_inv(a) * (1 + tv1) % P
    gx1 = (x1 * x1 * x1 + a * x1 + b) % P
    x2 = z * u2 * x1 % P
    gx2 = (x2 * x2 * x2 + a * x2 + b) % P
    if fp_is_square(gx1):
        x, y = x1, fp_sqrt(gx1)
    else:
        x, y = x2, fp_sqrt(gx2)
    if fp_sgn0(u) != fp_sgn0(y):
        y = (-y) % P
    return x, y


def g1_isogeny_map(x: int, y: int) -> G1Point:
    """Apply the 11-isogeny from the isogenous curve to G1."""
    x %= P
    y %= P
    xnum = _fp_poly(_G1_XNUM, x, monic=False)
    xden = _fp_poly(_G1_XDEN, x, monic=True)
    ynum = _fp_poly(_G1_YNUM, x, monic=False)
    yden = _fp_poly(_G1_YDEN, x, monic=True)
    xr = xnum * fp_inv(xden) % P
    yr = y * ynum * fp_inv(yden) % P
    return xr, yr, xden == 0 or yden == 0


def g1_map_to_curve_sswu(u: int) -> G1Point:
    """Map an Fp element to a point of the G1 curve."""
    return g1_isogeny_map(*g1_simple_swu_iso(u))


def g2_simple_swu_iso(u: Fp2) -> tuple[Fp2, Fp2]:
    """Map an Fp2 element to a point ``(x, y)`` of the curve isogenous to G2."""
    u = (u[0] % P, u[1] % P)
    z, a, b = _G2_Z, _G2_ISO_A, _G2_ISO_B
    u2 = fp2_mul(u, u)
    tv1 = fp2_inv(fp2_add(fp2_mul(fp2_mul(z, z), fp2_mul(u2, u2)), fp2_mul(z, u2)))
    if tv1 == FP2_ZERO:
        x1 = fp2_mul(b, fp2_inv(fp2_mul(z, a)))
    else:
        x1 = fp2_mul(fp2_mul(fp2_neg(b), fp2_inv(a)), fp2_add(FP2_ONE, tv1))
    gx1 = fp2_add(fp2_add(fp2_mul(fp2_mul(x1, x1), x1), fp2_mul(a, x1)), b)
    x2 = fp2_mul(fp2_mul(z, u2), x1)
    gx2 = fp2_add(fp2_add(fp2_mul(fp2_mul(x2, x2), x2), fp2_mul(a, x2)), b)
    if fp2_is_square(gx1):
        x, y = x1, fp2_sqrt(gx1)
    else:
        x, y = x2, fp2_sqrt(gx2)
    if fp2_sgn0(u) != fp2_sgn0(y):
        y = fp2_neg(y)
    return x, y


def g2_isogeny_map(x: Fp2, y: Fp2) -> G2Point:
    """Apply the 3-isogeny from the isogenous curve to G2."""
    x = (x[0] % P, x[1] % P)
    y = (y[0] % P, y[1] % P)
    xnum = _fp2_poly(_G2_XNUM, x, monic=False)
    xden = _fp2_poly(_G2_XDEN, x, monic=True)
    ynum = _fp2_poly(_G2_YNUM, x, monic=False)
    yden = _fp2_poly(_G2_YDEN, x, monic=True)
    xr = fp2_mul(xnum, fp2_inv(xden))
    yr = fp2_mul(y, fp2_mul(ynum, fp2_inv(yden)))
    return xr, yr, xden == FP2_ZERO or yden == FP2_ZERO


def g2_map_to_curve_sswu(u: Fp2) -> G2Point:
    """Map an Fp2 element to a point of the G2 curve."""
    return g2_isogeny_map(*g2_simple_swu_iso(u))