from qiwi_wallet.presentation.cli import main

main()
