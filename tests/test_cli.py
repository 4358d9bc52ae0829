import pytest

from cuproof.cli import main
from cuproof.setup import fast_test_setup, load_params


def test_cli_setup_prove_verify(tmp_path, capsys):
    params_path = str(tmp_path / "params.txt")
    proof_path = str(tmp_path / "proof.txt")

    assert main(["setup", "fast", params_path]) == 0
    assert load_params(params_path) == fast_test_setup()

    assert main(["prove", params_path, "3e8", "7d0", "539", proof_path]) == 0

    capsys.readouterr()
    assert main(["verify", params_path, proof_path]) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == "VALID"

    assert main(["verify", params_path, proof_path, "--lower", "0x3e8", "--upper", "0x7d0"]) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == "VALID"


def test_cli_out_of_range(tmp_path, capsys):
    params_path = str(tmp_path / "params.txt")
    proof_path = str(tmp_path / "proof.txt")

    assert main(["setup", "trusted", params_path, "--bits", "256"]) == 0
    assert main(["prove", params_path, "3e8", "7d0", "7d0", proof_path]) == 0

    capsys.readouterr()
    assert main(["verify", params_path, proof_path]) == 1
    assert capsys.readouterr().out.strip().splitlines()[-1] == "INVALID"


def test_cli_errors(tmp_path, capsys):
    params_path = str(tmp_path / "params.txt")
    proof_path = str(tmp_path / "proof.txt")

    assert main(["verify", params_path, proof_path]) == 2
    assert "error" in capsys.readouterr().err

    assert main(["setup", "fast", params_path]) == 0
    assert main(["prove", params_path, "10", "5", "7", proof_path]) == 2

    with pytest.raises(SystemExit):
        main(["prove", params_path, "xyz", "5", "7", proof_path])

    with pytest.raises(SystemExit):
        main(["setup", "slow", params_path])
